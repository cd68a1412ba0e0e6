"""
Core configuration and utilities for wikihubot.

Provides:
- Path constants (WIKIHUBOT_HOME, WIKIHUBOT_CONFIG_FILE)
- Config loading/saving functions
- Event file loading for the CLI
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from wikihubot.notifications.config import HubotConfig
from wikihubot.notifications.errors import MalformedEventError
from wikihubot.notifications.events import WikiEvent, parse_event

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path constants
# ---------------------------------------------------------------------------

WIKIHUBOT_HOME: Path = Path.home() / ".wikihubot"
WIKIHUBOT_CONFIG_FILE: Path = WIKIHUBOT_HOME / "config.yaml"


# ---------------------------------------------------------------------------
# Config loading/saving
# ---------------------------------------------------------------------------


def load_config(path: Optional[Path] = None) -> HubotConfig:
    """Load configuration from YAML file, or return defaults."""
    config_file = path or WIKIHUBOT_CONFIG_FILE
    if config_file.exists():
        try:
            data = yaml.safe_load(config_file.read_text()) or {}
            return HubotConfig(**data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_file, exc)
    return HubotConfig()


def save_config(config: HubotConfig, path: Optional[Path] = None) -> Path:
    """Save configuration to YAML file."""
    config_file = path or WIKIHUBOT_CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(
        yaml.safe_dump(config.model_dump(mode="json"), default_flow_style=False)
    )
    return config_file


def load_events(path: Path) -> list[WikiEvent]:
    """Read one event mapping or a list of them from a YAML/JSON file."""
    try:
        data: Any = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise MalformedEventError(f"Cannot parse {path}: {exc}") from exc
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("events", [data])
    if not isinstance(data, list):
        raise MalformedEventError(
            f"{path} must hold an event mapping or a list of events, got {type(data).__name__}"
        )
    return [parse_event(item) for item in data]


__all__ = [
    "WIKIHUBOT_HOME",
    "WIKIHUBOT_CONFIG_FILE",
    "HubotConfig",
    "load_config",
    "save_config",
    "load_events",
]
