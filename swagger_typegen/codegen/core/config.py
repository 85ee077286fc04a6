"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from dataclasses import dataclass, field, fields


DEFAULT_WRAPPER = "declare namespace OpenAPI2"

# Shorthands accepted for the ``wrapper`` option
WRAPPER_SHORTHANDS = {
    "namespace": "declare namespace OpenAPI2",
    "module": "declare module OpenAPI2",
}

# camelCase spellings accepted as option names
OPTION_ALIASES = {
    "camelCase": "camelcase",
    "propertyMapper": "property_mapper",
    "indentSize": "indent_size",
    "addComments": "add_comments",
}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Configuration for declaration generation."""

    # Naming settings
    camelcase: bool = False

    # Output shape
    wrapper: Union[str, bool, None] = DEFAULT_WRAPPER
    warning: bool = True
    add_comments: bool = True

    # Code style settings
    indent_size: int = 2

    # Per-property override hook: (original node, draft Property) -> Property
    property_mapper: Optional[Callable] = None

    # Custom settings (unknown keys)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def wrapper_line(self) -> Optional[str]:
        """Opening line of the wrapper block, or None when unwrapped."""
        if self.wrapper is None or self.wrapper is False:
            return None
        if self.wrapper is True:
            return DEFAULT_WRAPPER
        text = str(self.wrapper).strip()
        if not text:
            return None
        return WRAPPER_SHORTHANDS.get(text, text)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "camelcase": False,
            "wrapper": DEFAULT_WRAPPER,
            "warning": True,
            "add_comments": True,
            "indent_size": 2,
        }

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = self._defaults.copy()

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides
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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            key = OPTION_ALIASES.get(key, key)
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for name in ("camelcase", "warning", "add_comments"):
            if not isinstance(getattr(config, name), bool):
                warnings.append(f"{name} should be a boolean, got {getattr(config, name)!r}")

        if not isinstance(config.wrapper, (str, bool, type(None))):
            warnings.append(f"Invalid wrapper: {config.wrapper!r}")
        elif isinstance(config.wrapper, str) and config.wrapper_line and not config.wrapper_line.split()[-1].isidentifier():
            warnings.append(f"Wrapper does not end with a name: {config.wrapper}")

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.property_mapper is not None and not callable(config.property_mapper):
            warnings.append("property_mapper must be callable")

        for key in config.custom:
            warnings.append(f"Unknown option: {key}")

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
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
