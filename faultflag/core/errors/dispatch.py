# faultflag/core/errors/dispatch.py
"""
Exhaustive flag handling.

Python has no compiler-checked switch, so completeness of a handler table
is asserted at runtime: every member of the flag enumeration must have a
handler, otherwise MissingHandlerError is raised before anything runs.

    handle(err, {
        Flag.ALFA: retry,
        Flag.BRAVO: report,
        Flag.CHARLIE: abort,
    }, default=generic)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Hashable, List, Mapping, Optional, Type, TypeVar
import logging

from faultflag.config.loader import ChainConfig
from .chain import find_flagged
from .flags import Flag


logger = logging.getLogger(__name__)

T = TypeVar("T")


class MissingHandlerError(ValueError):
    """A handler table leaves some flags unhandled."""

    def __init__(self, missing: List[Enum]) -> None:
        self.missing = missing
        names = ", ".join(str(m.value) for m in missing)
        super().__init__(f"missing cases for flags: {names}")


def check_exhaustive(handlers: Mapping[Hashable, Any], flags: Type[Enum] = Flag) -> None:
    missing = [member for member in flags if member not in handlers]
    if missing:
        raise MissingHandlerError(missing)


def handle(
    err: Optional[BaseException],
    handlers: Mapping[Hashable, Optional[Callable[[Any], T]]],
    default: Callable[[Optional[BaseException]], T],
    flags: Type[Enum] = Flag,
    config: Optional[ChainConfig] = None,
) -> Optional[T]:
    """
    Route err to the handler of its outermost flag.

    Args:
        err: Error to classify
        handlers: One handler per flag; called with the flagged layer.
            A None handler marks the flag as deliberately ignored
        default: Called with err when no classification is available
        flags: Enumeration the table must cover
        config: Chain config (None = active config)

    Returns:
        Whatever the chosen handler returns
    """
    check_exhaustive(handlers, flags)

    found = find_flagged(err, config=config)
    if found is None:
        return default(err)

    if found.flag not in handlers:
        logger.warning(f"Unknown flag {found.flag!r} on {type(found).__name__}, using default handler")
        return default(err)

    handler = handlers[found.flag]
    if handler is None:
        return None
    return handler(found)
