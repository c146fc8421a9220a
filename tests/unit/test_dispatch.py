# tests/unit/test_dispatch.py
from __future__ import annotations

from enum import Enum
import logging

import pytest

from faultflag import Flag, FlaggedError, MissingHandlerError, check_exhaustive, handle, new, wrap


err_root = ValueError("root error")

HANDLERS = {
    Flag.ALFA: lambda e: "alfa",
    Flag.BRAVO: lambda e: "bravo",
    Flag.CHARLIE: lambda e: "charlie",
}


def generic(err):
    return "generic"


def test_routes_to_outermost_flag():
    err = wrap(new(new(err_root, Flag.ALFA), Flag.CHARLIE), "ctx")

    assert handle(err, HANDLERS, default=generic) == "charlie"


def test_handler_receives_flagged_layer():
    err = new(err_root, Flag.BRAVO)
    received = []

    handlers = dict(HANDLERS)
    handlers[Flag.BRAVO] = received.append
    handle(err, handlers, default=generic)

    assert received == [err]
    assert isinstance(received[0], FlaggedError)


def test_unclassified_goes_to_default():
    assert handle(err_root, HANDLERS, default=generic) == "generic"
    assert handle(None, HANDLERS, default=generic) == "generic"


def test_missing_case_is_rejected_before_dispatch():
    handlers = {Flag.ALFA: lambda e: "alfa", Flag.BRAVO: lambda e: "bravo"}

    with pytest.raises(MissingHandlerError) as exc_info:
        handle(new(err_root, Flag.ALFA), handlers, default=generic)

    assert exc_info.value.missing == [Flag.CHARLIE]
    assert "Charlie" in str(exc_info.value)


def test_check_exhaustive_passes_for_full_table():
    check_exhaustive(HANDLERS)


def test_unknown_flag_logs_and_uses_default(caplog):
    err = FlaggedError(err_root, "Delta")

    with caplog.at_level(logging.WARNING, logger="faultflag.core.errors.dispatch"):
        assert handle(err, HANDLERS, default=generic) == "generic"

    assert "Delta" in caplog.text


def test_custom_enumeration():
    class Severity(str, Enum):
        LOW = "low"
        HIGH = "high"

    err = FlaggedError(err_root, Severity.HIGH)
    handlers = {Severity.LOW: lambda e: 1, Severity.HIGH: lambda e: 2}

    assert handle(err, handlers, default=lambda e: 0, flags=Severity) == 2

    with pytest.raises(MissingHandlerError):
        check_exhaustive({Severity.LOW: None}, Severity)


def test_flag_mapped_to_none_is_ignored_not_unknown(caplog):
    handlers = dict(HANDLERS)
    handlers[Flag.CHARLIE] = None

    with caplog.at_level(logging.WARNING, logger="faultflag.core.errors.dispatch"):
        assert handle(new(err_root, Flag.CHARLIE), handlers, default=generic) is None

    assert "Unknown flag" not in caplog.text
