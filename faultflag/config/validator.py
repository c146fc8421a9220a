# faultflag/config/validator.py
"""
Configuration Validator

Validates chain configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Literal
from dataclasses import dataclass

if TYPE_CHECKING:
    from .loader import ChainConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "chain.follow_context"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: "ChainConfig") -> List[ConfigIssue]:
    """
    Validate chain configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(config.follow_context, bool):
        issues.append(ConfigIssue(
            level="error",
            path="chain.follow_context",
            message=f"follow_context must be a boolean, got {config.follow_context!r}",
            hint="Use true or false",
        ))

    return issues
