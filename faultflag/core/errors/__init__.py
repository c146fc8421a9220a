# faultflag/core/errors/__init__.py
"""
Core error types for faultflag.

This package defines the components responsible for:
- Classifying errors (Flag, FlaggedError)
- Walking error chains (contains, find, wrap, join)
- Handling classified errors (handle)

No side effects on import.
"""

from .flags import Flag
from .flagged import Flagged, FlaggedError, new, blank
from .chain import (
    WrappedError,
    JoinError,
    causes,
    unwrap,
    walk,
    contains,
    find,
    find_flagged,
    flag_of,
    wrap,
    join,
)
from .dispatch import MissingHandlerError, check_exhaustive, handle

__all__ = [
    "Flag",
    "Flagged",
    "FlaggedError",
    "new",
    "blank",
    "WrappedError",
    "JoinError",
    "causes",
    "unwrap",
    "walk",
    "contains",
    "find",
    "find_flagged",
    "flag_of",
    "wrap",
    "join",
    "MissingHandlerError",
    "check_exhaustive",
    "handle",
]
