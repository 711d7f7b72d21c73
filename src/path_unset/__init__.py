from .paths import MISSING, find_key, is_container, to_segments
from .unset import has, unset

__all__ = [
    "unset",
    "has",
    "to_segments",
    "find_key",
    "is_container",
    "MISSING",
]
