"""Configuration helpers for ninewire."""

from .model import CodecSettings
from .settings import load_settings, settings_from_mapping
from . import logging, settings  # noqa: F401  # pyright: ignore[reportUnusedImport]

__all__ = ["CodecSettings", "load_settings", "settings_from_mapping"]
