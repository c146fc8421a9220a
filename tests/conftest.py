# tests/conftest.py
from __future__ import annotations

import pytest

from faultflag.config import reset_config


@pytest.fixture(autouse=True)
def _reset_active_config():
    """Every test starts from the code-default chain config"""
    reset_config()
    yield
    reset_config()
