"""Tests for GeneratorConfig."""

import pytest

from scss_dts.config import GeneratorConfig


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.threads == 4
        assert config.extension == "scss"
        assert config.suffix == ".d.ts"
        assert config.field_order == "source"
        assert config.template_path is None
        assert "node_modules" in config.ignore_dirs

    def test_frozen(self):
        config = GeneratorConfig()
        with pytest.raises(Exception):
            config.threads = 8  # type: ignore[misc]

    def test_with_overrides_skips_none(self):
        config = GeneratorConfig().with_overrides(threads=2, suffix=None)
        assert config.threads == 2
        assert config.suffix == ".d.ts"

    @pytest.mark.parametrize("kwargs", [
        {"threads": 0},
        {"field_order": "random"},
        {"suffix": ""},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GeneratorConfig(**kwargs)
