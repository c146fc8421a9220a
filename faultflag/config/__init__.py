# faultflag/config/__init__.py
"""
Configuration for chain walking.

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import (
    ChainConfig,
    DEFAULT_CONFIG_PATH,
    load_config,
    get_config,
    set_config,
    reset_config,
)
from .validator import ConfigIssue, validate_config

__all__ = [
    "ChainConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "ConfigIssue",
    "validate_config",
]
