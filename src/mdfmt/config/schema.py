"""Pydantic model for formatter configuration."""

from __future__ import annotations

import codecs
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from mdfmt.config.defaults import (
    DEFAULT_ALIGN_CONTENT,
    DEFAULT_CODE_FENCES,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT,
    DEFAULT_WIDTH,
)
from mdfmt.errors import ConfigError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class WidthPolicy(StrEnum):
    UNICODE = "unicode"
    ASCII = "ascii"


class FormatterConfig(BaseModel):
    width: WidthPolicy = WidthPolicy(DEFAULT_WIDTH)
    strict: bool = DEFAULT_STRICT
    code_fences: bool = DEFAULT_CODE_FENCES
    align_content: bool = DEFAULT_ALIGN_CONTENT
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding '{value}'") from None
        return value

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> FormatterConfig:
        """Validate a merged config dict, ignoring keys this model does not know."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"]) or None
            raise ConfigError(f"Invalid configuration for '{key}': {first['msg']}", key=key) from e
