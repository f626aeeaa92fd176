"""Open key-value metadata attached to chunks and content."""

from collections.abc import Mapping
from typing import Any

from ragdesk.domain.exceptions import ValidationError

Metadata = dict[str, Any]


def coerce_metadata(value: object) -> Metadata:
    """Validate caller-supplied metadata and return a fresh dict.

    None means "no metadata". Anything that is not a mapping with string
    keys is rejected.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError("metadata must be an object")
    for key in value:
        if not isinstance(key, str):
            raise ValidationError("metadata keys must be strings")
    return dict(value)
