"""Tests for the formatter config model."""

import pytest

from mdfmt.config.defaults import get_defaults
from mdfmt.config.schema import FormatterConfig, WidthPolicy
from mdfmt.errors import ConfigError


class TestFormatterConfig:
    def test_defaults(self):
        config = FormatterConfig()
        assert config.width == WidthPolicy.UNICODE
        assert config.strict is False
        assert config.code_fences is True
        assert config.align_content is False
        assert config.log_level == "WARNING"

    def test_from_defaults_mapping(self):
        assert FormatterConfig.from_mapping(get_defaults()) == FormatterConfig()

    def test_unknown_keys_ignored(self):
        config = FormatterConfig.from_mapping({"width": "ascii", "something_else": 1})
        assert config.width == WidthPolicy.ASCII

    def test_log_level_normalized(self):
        assert FormatterConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_width(self):
        with pytest.raises(ConfigError) as exc:
            FormatterConfig.from_mapping({"width": "proportional"})
        assert exc.value.key == "width"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc:
            FormatterConfig.from_mapping({"log_level": "LOUD"})
        assert exc.value.key == "log_level"

    def test_encoding_alias_accepted(self):
        assert FormatterConfig(encoding="latin-1").encoding == "latin-1"

    def test_invalid_encoding(self):
        with pytest.raises(ConfigError) as exc:
            FormatterConfig.from_mapping({"encoding": "bogus"})
        assert exc.value.key == "encoding"
