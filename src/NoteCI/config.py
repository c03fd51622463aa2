# ============================================================================
# NoteCI - Configuration Management
#
# Purpose: Load and manage configuration from YAML, CLI args, and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-10-04: Initial configuration system (notes, selection, output, logging)
#   2026-10-08: SelectionConfig.tie_break / skip_unparsable_timestamps
# ============================================================================

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import pydantic
import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field

from NoteCI.errors import ConfigurationError
from NoteCI.logging_utils import DEFAULT_FORMAT
from NoteCI.reporting.schema import REF


class NotesConfig(BaseModel):
    """Where notes come from and how blobs are split."""

    ref: str = REF  # Informational; notes are fetched outside this package
    split_lines: bool = True  # One note per line of a notes blob


class SelectionConfig(BaseModel):
    """Latest-report selection policy."""

    tie_break: Literal["first", "last"] = "last"
    # When False, a single non-integer timestamp fails the whole selection
    skip_unparsable_timestamps: bool = False


class OutputConfig(BaseModel):
    """CLI output formatting."""

    indent: Optional[int] = None  # None = compact JSON


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_FORMAT


class Config(BaseModel):
    """Root configuration object."""

    notes: NotesConfig = Field(default_factory=NotesConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
            ConfigurationError: If values do not match the config schema
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data, source=str(yaml_path))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "defaults") -> "Config":
        """
        Build configuration from a plain dict with environment variable overrides.

        Args:
            data: Configuration dictionary (may be partial)
            source: Where the data came from, for error messages

        Returns:
            Config instance

        Raises:
            ConfigurationError: If values do not match the config schema
        """
        # Apply environment variable overrides
        data = cls._apply_env_overrides(data)

        try:
            return cls(**data)
        except pydantic.ValidationError as e:
            raise ConfigurationError(f"Invalid configuration ({source})", details=str(e)) from e

    @classmethod
    def from_default(cls) -> "Config":
        """
        Load configuration from default config file.

        Returns:
            Config instance
        """
        package_root = Path(__file__).parent.parent.parent
        default_config = package_root / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        else:
            # Return with defaults if file doesn't exist
            return cls.from_dict({})

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern:
        NOTECI_<SECTION>_<KEY>=value

        Field names may contain underscores (e.g. tie_break), so the remainder
        after the section is matched against keys present in the section
        rather than split naively. Sections missing from ``data`` are filled
        from the defaults so any known key can be overridden.

        Examples:
            NOTECI_SELECTION_TIE_BREAK=first  → data["selection"]["tie_break"]
            NOTECI_LOGGING_LEVEL=DEBUG        → data["logging"]["level"]

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        prefix = "NOTECI_"
        defaults = cls().model_dump()

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            remainder = env_key[len(prefix) :].lower()  # e.g. "selection_tie_break"

            for section, section_defaults in defaults.items():
                section_prefix = section + "_"
                if not remainder.startswith(section_prefix):
                    continue

                field = remainder[len(section_prefix) :]
                if field not in section_defaults:
                    break

                section_data = data.setdefault(section, {})
                if not isinstance(section_data, dict):
                    break
                section_data[field] = cls._parse_env_value(env_value)
                break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (str, int, float, or bool)
        """
        # Try boolean
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        # Try int
        try:
            return int(value)
        except ValueError:
            pass

        # Try float
        try:
            return float(value)
        except ValueError:
            pass

        # Return as string
        return value
