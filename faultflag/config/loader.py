# faultflag/config/loader.py
"""
Configuration Loader

Loads chain-walking configuration from YAML with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Nothing is read implicitly: the active config is the code default
  until load_config()/set_config() says otherwise
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import yaml

from .validator import validate_config, ConfigIssue


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".faultflag" / "config.yml"


@dataclass(frozen=True)
class ChainConfig:
    """
    How chain operations discover the next error.

    follow_context: Also follow implicit __context__ links (errors raised
        while handling another one), unless __suppress_context__ is set
    """

    follow_context: bool = False

    @classmethod
    def default(cls) -> "ChainConfig":
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ChainConfig":
        """
        Load configuration from YAML file.

        Only the `chain:` section is read; unknown keys are ignored.
        Returns code defaults when the file is missing or unreadable.
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        chain = yaml_data.get("chain") if isinstance(yaml_data, dict) else None
        if not isinstance(chain, dict):
            return config

        known = {f.name for f in fields(cls)}
        merged = {**config.to_dict(), **{k: v for k, v in chain.items() if k in known}}
        return cls(**merged)

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "follow_context": self.follow_context,
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read config {path}, using defaults: {e}")
        return None


def load_config(config_path: Optional[Path] = None) -> ChainConfig:
    """
    Load configuration and validate it.

    Args:
        config_path: Optional path to YAML file (default ~/.faultflag/config.yml)

    Returns:
        ChainConfig instance. Any error-level issue falls back to code defaults.
    """
    config = ChainConfig.from_yaml(config_path)

    issues = config.validate()
    for issue in issues:
        if issue.level == "error":
            logger.error(str(issue))
        else:
            logger.warning(str(issue))

    if any(issue.level == "error" for issue in issues):
        return ChainConfig.default()
    return config


# Process-wide active configuration
_ACTIVE_CONFIG: Optional[ChainConfig] = None


def get_config() -> ChainConfig:
    """Active configuration used when chain operations get config=None"""
    if _ACTIVE_CONFIG is None:
        return ChainConfig.default()
    return _ACTIVE_CONFIG


def set_config(config: ChainConfig) -> None:
    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config
    logger.debug(f"Active chain config set: {config.to_dict()}")


def reset_config() -> None:
    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = None
