# faultflag/core/errors/flagged.py
from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Flagged(Protocol):
    """Anything exposing a `flag`. Chain lookups only ever see exceptions."""

    @property
    def flag(self) -> Optional[Hashable]:
        ...


class FlaggedError(Exception):
    """
    Decorates an existing exception with a single Flag.

    - str() is the cause's text; the flag is structural, not textual
    - unwrap() returns the cause in exactly one step
    - both fields are fixed at construction
    """

    def __init__(self, cause: Optional[BaseException], flag: Optional[Hashable]) -> None:
        super().__init__(cause, flag)
        self._cause = cause
        self._flag = flag
        # keep tracebacks showing the wrapped error
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def flag(self) -> Optional[Hashable]:
        return self._flag

    def unwrap(self) -> Optional[BaseException]:
        return self._cause

    def __str__(self) -> str:
        if self._cause is None:
            return ""
        return str(self._cause)

    def __repr__(self) -> str:
        return f"FlaggedError({self._cause!r}, {self._flag!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlaggedError):
            return NotImplemented
        return self._cause is other._cause and self._flag == other._flag

    def __hash__(self) -> int:
        return hash((id(self._cause), self._flag))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flag": None if self._flag is None else str(self._flag),
            "message": str(self),
        }

    # -------- factories --------

    @classmethod
    def blank(cls) -> "FlaggedError":
        """
        Empty placeholder: no cause, no flag.

        Pass it as the default of chain.find() so a miss still leaves the
        caller holding a FlaggedError whose flag is None.
        """
        return cls(None, None)


def new(cause: Optional[BaseException], flag: Hashable) -> FlaggedError:
    """
    Flag an existing error. The cause is stored as-is.

    flag is usually a Flag member; any hashable value is accepted.
    """
    return FlaggedError(cause, flag)


def blank() -> FlaggedError:
    return FlaggedError.blank()
