"""
Configuration management for model generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .constants import DEFAULT_MODEL_PKG
from .naming import NamingCase
from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Settings that shape generated model fields."""

    # Output settings
    model_pkg: str = DEFAULT_MODEL_PKG

    # Type handling
    field_nullable: bool = False  # pointer types for nullable columns
    field_coverable: bool = False  # pointer types for columns with defaults
    field_signable: bool = False  # unsigned Go ints for unsigned columns

    # Tag settings
    field_with_default_tag: bool = True
    json_tag_case: str = NamingCase.ORIGINAL.value

    # Extra schema type -> Go type mappings
    data_type_overrides: Dict[str, str] = field(default_factory=dict)

    # Unrecognized settings are kept here
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def json_naming(self) -> NamingCase:
        try:
            return NamingCase(self.json_tag_case)
        except ValueError:
            return NamingCase.ORIGINAL


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration (defaults < file < overrides)
        """
        base_config = dict(self._defaults)
        base_config["data_type_overrides"] = {}
        base_config["custom"] = {}

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        overrides = config_args.get('data_type_overrides') or {}
        if not isinstance(overrides, dict):
            raise ConfigError("data_type_overrides must be an object of type names")
        config_args['data_type_overrides'] = {str(k): str(v) for k, v in overrides.items()}

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        valid_cases = {case.value for case in NamingCase}
        if config.json_tag_case not in valid_cases:
            warnings.append(f"Invalid json_tag_case: {config.json_tag_case}")

        if not config.model_pkg or not config.model_pkg.isidentifier():
            warnings.append(f"Invalid Go package name: {config.model_pkg}")
        elif config.model_pkg != config.model_pkg.lower():
            warnings.append(f"Package names should be lowercase: {config.model_pkg}")

        for db_type, go_type in config.data_type_overrides.items():
            if not go_type.strip():
                warnings.append(f"Empty Go type for data type override: {db_type}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "model_pkg": "model",
    "field_nullable": True,
    "field_signable": True,
    "json_tag_case": "camel",
    "data_type_overrides": {
        "uuid": "string",
        "jsonb": "datatypes.JSON",
    },
}
