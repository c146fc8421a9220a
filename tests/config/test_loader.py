# tests/config/test_loader.py
from __future__ import annotations

import logging

import pytest

from faultflag.config import (
    ChainConfig,
    ConfigIssue,
    get_config,
    load_config,
    reset_config,
    set_config,
    validate_config,
)


def test_default_config():
    config = ChainConfig.default()

    assert config.follow_context is False
    assert config.validate() == []
    assert config.to_dict() == {"follow_context": False}


def test_config_is_frozen():
    config = ChainConfig.default()

    with pytest.raises(AttributeError):
        config.follow_context = True


def test_from_yaml_merges_over_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("chain:\n  follow_context: true\n  unknown_key: 1\n", encoding="utf-8")

    config = ChainConfig.from_yaml(path)

    assert config.follow_context is True


def test_from_yaml_missing_file_uses_defaults(tmp_path):
    assert ChainConfig.from_yaml(tmp_path / "absent.yml") == ChainConfig.default()


def test_from_yaml_without_chain_section(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("other:\n  key: value\n", encoding="utf-8")

    assert ChainConfig.from_yaml(path) == ChainConfig.default()


def test_invalid_yaml_logs_and_uses_defaults(tmp_path, caplog):
    path = tmp_path / "config.yml"
    path.write_text("chain: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="faultflag.config.loader"):
        config = load_config(path)

    assert config == ChainConfig.default()
    assert "Failed to read config" in caplog.text


def test_load_config_rejects_error_level_issues(tmp_path, caplog):
    path = tmp_path / "config.yml"
    path.write_text("chain:\n  follow_context: sometimes\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="faultflag.config.loader"):
        config = load_config(path)

    assert config == ChainConfig.default()
    assert "chain.follow_context" in caplog.text


def test_load_config_ignores_unknown_chain_keys(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("chain:\n  follow_context: true\n  max_depth: 2\n", encoding="utf-8")

    config = load_config(path)

    assert config == ChainConfig(follow_context=True)
    assert not hasattr(config, "max_depth")


def test_validate_config_levels():
    assert [i.level for i in validate_config(ChainConfig(follow_context="yes"))] == ["error"]
    assert validate_config(ChainConfig(follow_context=True)) == []


def test_config_issue_str():
    issue = ConfigIssue(level="warn", path="chain.follow_context", message="not a boolean", hint="use true")

    assert str(issue) == "[warn] [chain.follow_context] not a boolean\n   Hint: use true"


def test_active_config_roundtrip():
    assert get_config() == ChainConfig.default()

    custom = ChainConfig(follow_context=True)
    set_config(custom)
    assert get_config() is custom

    reset_config()
    assert get_config() == ChainConfig.default()
