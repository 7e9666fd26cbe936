# SPDX-License-Identifier: MIT
"""Tests for ninjawriter.core.config."""

import json

import pytest

from ninjawriter.core.config import WriterConfig
from ninjawriter.core.errors import ConfigureError


class TestWriterConfig:
    def test_defaults(self):
        config = WriterConfig()
        assert config.width == 78
        assert config.encoding == "utf-8"

    @pytest.mark.parametrize("width", [0, -5])
    def test_rejects_non_positive_width(self, width):
        with pytest.raises(ConfigureError, match="positive"):
            WriterConfig(width=width)

    @pytest.mark.parametrize("width", ["80", 8.5, True])
    def test_rejects_non_integer_width(self, width):
        with pytest.raises(ConfigureError, match="integer"):
            WriterConfig(width=width)

    def test_rejects_unknown_encoding(self):
        with pytest.raises(ConfigureError, match="encoding"):
            WriterConfig(encoding="no-such-codec")

    def test_from_dict(self):
        config = WriterConfig.from_dict({"width": 100})
        assert config.width == 100
        assert config.encoding == "utf-8"

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigureError, match="colour"):
            WriterConfig.from_dict({"width": 80, "colour": "red"})


class TestWriterConfigLoad:
    def test_load(self, tmp_path):
        path = tmp_path / "ninjawriter.json"
        path.write_text(json.dumps({"width": 120, "encoding": "latin-1"}))

        config = WriterConfig.load(path)
        assert config == WriterConfig(width=120, encoding="latin-1")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigureError, match="cannot read config"):
            WriterConfig.load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{width: ")
        with pytest.raises(ConfigureError, match="invalid JSON"):
            WriterConfig.load(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigureError, match="JSON object"):
            WriterConfig.load(path)

    def test_bad_value_reports_path(self, tmp_path):
        path = tmp_path / "zero.json"
        path.write_text('{"width": 0}')
        with pytest.raises(ConfigureError) as exc_info:
            WriterConfig.load(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
