"""Marshmallow schema for CodecSettings validation."""

from __future__ import annotations

from typing import Any, Dict

from marshmallow import RAISE, Schema, fields, post_load, validate

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_HEXDUMP_LIMIT,
    DEFAULT_LOG_STREAM,
    DEFAULT_STRICT_STAT_LENGTH,
)
from .model import CodecSettings


class CodecSettingsSchema(Schema):
    """Declarative validation schema for ninewire settings."""

    class Meta:
        unknown = RAISE

    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    log_stream = fields.Bool(load_default=DEFAULT_LOG_STREAM)
    strict_stat_length = fields.Bool(load_default=DEFAULT_STRICT_STAT_LENGTH)
    hexdump_limit = fields.Int(load_default=DEFAULT_HEXDUMP_LIMIT, validate=validate.Range(min=0))

    @post_load
    def make_settings(self, data: Dict[str, Any], **kwargs: Any) -> CodecSettings:
        return CodecSettings(**data)
