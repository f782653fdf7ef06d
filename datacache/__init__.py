"""Data-oriented storage of object fields in per-field collections."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "collection",
    "exceptions",
    "ids",
    "object_counter",
    "string_streamer",
    "using",
]