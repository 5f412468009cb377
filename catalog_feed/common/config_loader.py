"""
Configuration Loader

Loads YAML configuration for item validation rules and export settings.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigError

CONFIG_FILENAME = 'catalog.yaml'

DEFAULT_VALIDATION_RULES: Dict[str, Any] = {
    'upc_lengths': [12],
    'require_numeric_upc': True,
    'require_name': True,
    'warn_missing_brand': True,
}

DEFAULT_EXPORT_SETTINGS: Dict[str, Any] = {
    'encoding': 'utf-8',
    'price_places': 2,
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str = CONFIG_FILENAME) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'catalog.yaml')

    Returns:
        Parsed YAML content as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is not valid YAML or not a mapping
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at top level of {config_path}")
    return data


def _merged(defaults: Dict[str, Any], section: Any, name: str) -> Dict[str, Any]:
    if section is None:
        return dict(defaults)
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return {**defaults, **section}


def load_validation_rules(config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """
    Load item validation rules, filling gaps from the built-in defaults.

    Example:
        {'upc_lengths': [12], 'require_numeric_upc': True, ...}
    """
    if config is None:
        config = load_config()
    return _merged(DEFAULT_VALIDATION_RULES, config.get('validation'), 'validation')


def load_export_settings(config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load CSV export settings, filling gaps from the built-in defaults."""
    if config is None:
        config = load_config()
    return _merged(DEFAULT_EXPORT_SETTINGS, config.get('export'), 'export')
