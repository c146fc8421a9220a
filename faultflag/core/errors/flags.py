# faultflag/core/errors/flags.py
from __future__ import annotations

from enum import Enum


class Flag(str, Enum):
    """
    Classification tag attached to an error by one wrap layer.

    The set is closed on purpose: callers branch over every member
    (see dispatch.check_exhaustive). Adopting code with its own taxonomy
    defines its own Enum and passes it wherever `flags=` is accepted.
    """
    ALFA = "Alfa"
    BRAVO = "Bravo"
    CHARLIE = "Charlie"

    def __str__(self) -> str:
        return self.value
