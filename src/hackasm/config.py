"""
Assembler Configuration
=======================

Settings shared by the Assembler class and the hackasm command-line tool.
Configuration can come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Explicit constructor / command-line arguments, which always win
"""

from dataclasses import dataclass
import os

from hackasm.errors import ConfigError


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        strict_labels: Treat a repeated label declaration as an error
                       instead of keeping the first one (default: False)
        output_suffix: Extension for the default output file (default: ".hack")
    """

    strict_labels: bool = False
    output_suffix: str = ".hack"

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            HACKASM_STRICT_LABELS: "1", "true", "yes" or "on" to enable
            HACKASM_OUTPUT_SUFFIX: Output file extension (e.g. ".bin")

        Returns:
            AssemblerConfig with values from environment variables

        Raises:
            ConfigError: If HACKASM_OUTPUT_SUFFIX is "." or holds a path separator
        """
        config = cls()

        if strict := os.environ.get("HACKASM_STRICT_LABELS"):
            config.strict_labels = strict.strip().lower() in _TRUE_VALUES

        if suffix := os.environ.get("HACKASM_OUTPUT_SUFFIX"):
            suffix = suffix.strip()
            config.output_suffix = _check_suffix(
                suffix if suffix.startswith(".") else f".{suffix}"
            )

        return config


def _check_suffix(suffix: str) -> str:
    """Reject suffixes that Path.with_suffix cannot apply."""
    if suffix == ".":
        raise ConfigError("HACKASM_OUTPUT_SUFFIX", suffix, "suffix has no extension")
    if "/" in suffix or "\\" in suffix:
        raise ConfigError("HACKASM_OUTPUT_SUFFIX", suffix, "suffix contains a path separator")
    return suffix
