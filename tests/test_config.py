"""Tests for configuration loading."""

import json

import pytest

from agent_sidebar.config.loader import get_config_path, load_config, save_config
from agent_sidebar.config.schema import Config, ProviderConfig
from agent_sidebar.errors import ConfigError, InvalidSpec
from agent_sidebar.sidebar.width import Absolute, Percentage


def test_defaults_when_file_missing(tmp_path) -> None:
    config = load_config(tmp_path / "missing.json")
    assert config.sidebar.locked is True
    assert config.sidebar.position == "right"
    assert [p.key for p in config.providers.available] == ["claude", "gemini", "codex"]


def test_save_and_load(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = Config()
    config.sidebar = config.sidebar.model_copy(update={"width": "30%", "locked": False})
    config.providers = config.providers.model_copy(update={"default": "codex"})
    save_config(config, path)

    loaded = load_config(path)
    assert loaded.sidebar.width == "30%"
    assert loaded.sidebar.locked is False
    assert loaded.providers.default_provider().key == "codex"


def test_invalid_json_raises_config_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_position_raises_config_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"sidebar": {"position": "top"}}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_path_env_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("AGENT_SIDEBAR_CONFIG", str(tmp_path / "x.json"))
    assert get_config_path() == tmp_path / "x.json"


def test_width_specs_parsed_at_boundary() -> None:
    config = Config()
    assert config.sidebar.width_specs() == (Absolute(90), Absolute(50), Percentage(50.0))
    broken = config.sidebar.model_copy(update={"min_width": "abc"})
    with pytest.raises(InvalidSpec):
        broken.width_specs()


def test_provider_command_env_override(monkeypatch) -> None:
    provider = ProviderConfig(key="claude", command="claude", env_override="AGENT_SIDEBAR_CLAUDE_CMD")
    assert provider.resolve_command() == "claude"
    monkeypatch.setenv("AGENT_SIDEBAR_CLAUDE_CMD", "/opt/claude --fast")
    assert provider.resolve_command() == "/opt/claude --fast"
