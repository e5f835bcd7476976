"""Common utility functions and helpers for the weatherbridge package."""

from weatherbridge.utils.formatting import capitalize_phrase, to_percentage
from weatherbridge.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "capitalize_phrase",
    "to_percentage",
]
