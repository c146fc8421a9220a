# faultflag/__init__.py
"""
faultflag - classify errors with a flag without breaking the error chain

Basic usage:

    >>> from faultflag import Flag, new, contains, flag_of
    >>> root = LookupError("root")
    >>> err = new(root, Flag.ALFA)
    >>> str(err)
    'root'
    >>> contains(err, root)
    True
    >>> flag_of(new(err, Flag.BRAVO))
    <Flag.BRAVO: 'Bravo'>

Type extraction with a blank destination:

    >>> from faultflag import FlaggedError, find
    >>> find(ValueError("plain"), FlaggedError, FlaggedError.blank()).flag is None
    True
"""

__version__ = "0.1.0"

from .core.errors import (
    Flag,
    Flagged,
    FlaggedError,
    new,
    blank,
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
    MissingHandlerError,
    check_exhaustive,
    handle,
)
from .config import ChainConfig, load_config, get_config, set_config, reset_config

__all__ = [
    "__version__",

    # Classification
    "Flag",
    "Flagged",
    "FlaggedError",
    "new",
    "blank",

    # Chain operations
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

    # Handling
    "MissingHandlerError",
    "check_exhaustive",
    "handle",

    # Configuration
    "ChainConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
]
