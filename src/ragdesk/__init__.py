"""ragdesk - retrieval-augmented knowledge assistant API."""

__version__ = "0.1.0"
