# faultflag/core/errors/chain.py
"""
Error chain walking.

A chain is everything reachable from an error by following its links:

1. an unwrap() method (FlaggedError, WrappedError, adopting code)
2. the members of an exception group, in order (fan-in)
3. __cause__ (raise ... from ...)
4. __context__, only with ChainConfig.follow_context

Lookups are depth-first and outermost-first, so the most recently applied
flag is the one find_flagged() returns.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator, List, Optional, Tuple, Type, Union
import inspect
import logging

from faultflag.config.loader import ChainConfig, get_config
from .flagged import Flagged


logger = logging.getLogger(__name__)

KindSpec = Union[Type[Any], Tuple[Type[Any], ...]]


class WrappedError(Exception):
    """Adds context text in front of an error, keeping it unwrappable."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message, cause)
        self._message = message
        self._cause = cause
        self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException:
        return self._cause

    def unwrap(self) -> BaseException:
        return self._cause

    def __str__(self) -> str:
        return f"{self._message}: {self._cause}"


class JoinError(ExceptionGroup):
    """Fan-in of independent errors. Text is one member per line."""

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.exceptions)

    def derive(self, excs):
        return JoinError(self.message, excs)


def _unwrapper(err: BaseException):
    """err.unwrap if it can be called without arguments, else None"""
    unwrap_fn = getattr(err, "unwrap", None)
    if not callable(unwrap_fn):
        return None
    try:
        sig = inspect.signature(unwrap_fn)
    except (TypeError, ValueError):
        return None
    for param in sig.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            logger.debug(f"Ignoring {type(err).__name__}.unwrap: requires argument {param.name!r}")
            return None
    return unwrap_fn


def _links(err: BaseException, config: ChainConfig) -> Tuple[BaseException, ...]:
    unwrap_fn = _unwrapper(err)
    if unwrap_fn is not None:
        inner = unwrap_fn()
        return (inner,) if inner is not None else ()

    if isinstance(err, BaseExceptionGroup):
        return tuple(err.exceptions)

    if err.__cause__ is not None:
        return (err.__cause__,)

    if config.follow_context and not err.__suppress_context__ and err.__context__ is not None:
        return (err.__context__,)

    return ()


def causes(err: Optional[BaseException], config: Optional[ChainConfig] = None) -> Tuple[BaseException, ...]:
    """Direct children of err (several for groups, at most one otherwise)."""
    if err is None:
        return ()
    return _links(err, config or get_config())


def unwrap(err: Optional[BaseException], config: Optional[ChainConfig] = None) -> Optional[BaseException]:
    """
    One unwrap step.

    Groups have no single cause and return None; use causes() or walk()
    to reach their members.
    """
    if err is None:
        return None
    if isinstance(err, BaseExceptionGroup) and _unwrapper(err) is None:
        return None
    links = _links(err, config or get_config())
    return links[0] if links else None


def walk(err: Optional[BaseException], config: Optional[ChainConfig] = None) -> Iterator[BaseException]:
    """
    Yield err and everything reachable from it, depth-first, pre-order.

    Each error is yielded once even if the chain loops back on itself.
    """
    if err is None:
        return

    cfg = config or get_config()
    stack: List[BaseException] = [err]
    seen = set()

    while stack:
        node = stack.pop()
        if id(node) in seen:
            logger.debug(f"Chain revisits {type(node).__name__}, skipping")
            continue
        seen.add(id(node))
        yield node

        stack.extend(reversed(_links(node, cfg)))


def contains(
    err: Optional[BaseException],
    target: Optional[BaseException],
    config: Optional[ChainConfig] = None,
) -> bool:
    """True if target (a sentinel) is anywhere in err's chain."""
    if err is None or target is None:
        return err is target

    for node in walk(err, config):
        if node is target or node == target:
            return True
    return False


def find(
    err: Optional[BaseException],
    kind: KindSpec,
    default: Any = None,
    config: Optional[ChainConfig] = None,
) -> Any:
    """
    First (outermost) error in the chain that is an instance of kind.

    Returns default when nothing matches; a miss is a normal outcome.
    """
    if not isinstance(kind, (type, tuple)):
        raise TypeError(f"kind must be a type or a tuple of types, got {type(kind).__name__}")

    for node in walk(err, config):
        if isinstance(node, kind):
            return node
    return default


def find_flagged(
    err: Optional[BaseException],
    default: Any = None,
    config: Optional[ChainConfig] = None,
) -> Any:
    """Outermost flagged layer, i.e. the last flag applied."""
    return find(err, Flagged, default=default, config=config)


def flag_of(
    err: Optional[BaseException],
    default: Optional[Hashable] = None,
    config: Optional[ChainConfig] = None,
) -> Optional[Hashable]:
    found = find_flagged(err, config=config)
    if found is None:
        return default
    return found.flag


def wrap(err: Optional[BaseException], message: str) -> Optional[WrappedError]:
    if err is None:
        return None
    return WrappedError(message, err)


def join(*errors: Optional[BaseException]) -> Optional[JoinError]:
    """
    Combine independent errors; None entries are dropped.

    Returns None when nothing is left. Members must be Exception
    instances (ExceptionGroup rule).
    """
    errs = [e for e in errors if e is not None]
    if not errs:
        return None
    return JoinError("joined errors", errs)
