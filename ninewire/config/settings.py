"""Settings loader for ninewire.

Settings come from the ``[ninewire]`` table of an optional TOML file.
Without a file every setting takes its default.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ..const import CONFIG_TABLE
from .model import CodecSettings
from .schema import CodecSettingsSchema

logger = logging.getLogger(__name__)


def _load_raw_settings(path: Path) -> dict[str, Any]:
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug("No settings file at %s; using defaults.", path)
        return {}
    section = raw.get(CONFIG_TABLE, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{CONFIG_TABLE}] in {path} must be a table")
    return section


def settings_from_mapping(raw: dict[str, Any]) -> CodecSettings:
    """Validate ``raw`` and build :class:`CodecSettings`.

    Raises:
        marshmallow.ValidationError: If a value is invalid or a key unknown.
    """
    return CodecSettingsSchema().load(raw)


def load_settings(path: str | Path | None = None) -> CodecSettings:
    """Load settings from ``path`` or fall back to defaults."""
    if path is None:
        return CodecSettings()
    return settings_from_mapping(_load_raw_settings(Path(path)))


__all__ = ["CodecSettings", "load_settings", "settings_from_mapping"]
