# =============================================================================
# test_config.py - Configuration Tests
# =============================================================================

import pytest

from hackasm.config import AssemblerConfig
from hackasm.errors import ConfigError


class TestAssemblerConfig:
    """Test defaults and environment overrides."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("HACKASM_STRICT_LABELS", raising=False)
        monkeypatch.delenv("HACKASM_OUTPUT_SUFFIX", raising=False)

    def test_defaults(self):
        config = AssemblerConfig()
        assert config.strict_labels is False
        assert config.output_suffix == ".hack"

    def test_from_env_without_variables(self):
        assert AssemblerConfig.from_env() == AssemblerConfig()

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        ("true", True),
        ("YES", True),
        ("on", True),
        ("0", False),
        ("no", False),
    ])
    def test_strict_labels(self, monkeypatch, value, expected):
        monkeypatch.setenv("HACKASM_STRICT_LABELS", value)
        assert AssemblerConfig.from_env().strict_labels is expected

    def test_output_suffix(self, monkeypatch):
        monkeypatch.setenv("HACKASM_OUTPUT_SUFFIX", ".bin")
        assert AssemblerConfig.from_env().output_suffix == ".bin"

    def test_output_suffix_without_dot(self, monkeypatch):
        monkeypatch.setenv("HACKASM_OUTPUT_SUFFIX", "txt")
        assert AssemblerConfig.from_env().output_suffix == ".txt"

    @pytest.mark.parametrize("value", [".", "x/y", "a\\b", "./out"])
    def test_output_suffix_rejected(self, monkeypatch, value):
        monkeypatch.setenv("HACKASM_OUTPUT_SUFFIX", value)
        with pytest.raises(ConfigError) as exc_info:
            AssemblerConfig.from_env()
        assert exc_info.value.setting == "HACKASM_OUTPUT_SUFFIX"
        assert "invalid HACKASM_OUTPUT_SUFFIX" in str(exc_info.value)
