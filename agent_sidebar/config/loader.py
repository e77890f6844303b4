"""Load and save the agent-sidebar JSON configuration file."""

from __future__ import annotations

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from agent_sidebar.config.schema import Config
from agent_sidebar.errors import ConfigError

_CONFIG_ENV = "AGENT_SIDEBAR_CONFIG"


def get_config_path() -> Path:
    """Return the config file path, honouring the AGENT_SIDEBAR_CONFIG override."""
    override = os.getenv(_CONFIG_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".agent-sidebar" / "config.json"


def load_config(path: Path | None = None) -> Config:
    """Load configuration from disk, falling back to defaults when absent."""
    target = path or get_config_path()
    if not target.exists():
        logger.debug(f"[config] {target} not found, using defaults")
        return Config()

    try:
        payload = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {target}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Invalid config {target}: expected a JSON object")

    try:
        return Config(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {target}: {exc}") from exc


def save_config(config: Config, path: Path | None = None) -> Path:
    """Persist configuration to disk and return the written path."""
    target = path or get_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = config.model_dump(mode="json")
    target.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.debug(f"[config] saved {target}")
    return target
