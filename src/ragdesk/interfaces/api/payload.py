"""Request body helpers."""

import falcon
import falcon.asgi

from ragdesk.domain.exceptions import ValidationError


async def read_json_object(req: falcon.asgi.Request) -> dict:
    """Return the JSON body; it must be an object."""
    try:
        body = await req.get_media()
    except (falcon.MediaNotFoundError, falcon.MediaMalformedError) as e:
        raise ValidationError("Invalid request body") from e
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")
    return body


def optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


def optional_int(body: dict, key: str, minimum: int) -> int | None:
    """Integer field; null/absent means default. Booleans are rejected."""
    value = body.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValidationError(f"{key} must be an integer >= {minimum}")
    return value


def optional_float(body: dict, key: str, lower: float, upper: float) -> float | None:
    value = body.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number")
    if not lower <= value <= upper:
        raise ValidationError(f"{key} must be between {lower} and {upper}")
    return float(value)
