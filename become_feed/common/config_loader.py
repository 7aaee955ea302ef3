"""
Configuration Loader

Loads and saves the YAML feed settings (thumbnail size, feed currency,
output directory).
"""

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..models.feed import FeedSettings

SETTINGS_FILENAME = 'feed_settings.yaml'


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


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'feed_settings.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename
    return load_yaml(config_path)


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML file by path.

    Returns:
        Parsed YAML content (empty dict for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def settings_from_dict(data: Dict[str, Any]) -> FeedSettings:
    """
    Build FeedSettings from a parsed 'become' settings mapping.

    Missing keys fall back to the install-time defaults.

    Raises:
        ValueError: If a value is not an integer or the picture size is invalid
    """
    defaults = FeedSettings()
    try:
        return FeedSettings(
            product_picture_size=int(data.get('product_picture_size', defaults.product_picture_size)),
            currency_id=int(data.get('currency_id') or 0),
            primary_store_currency_id=int(
                data.get('primary_store_currency_id', defaults.primary_store_currency_id)
            ),
            output_dir=str(data.get('output_dir') or defaults.output_dir),
        )
    except TypeError as e:
        raise ValueError(f"Invalid feed settings: {e}") from e


def load_feed_settings(path: Optional[str | Path] = None) -> FeedSettings:
    """
    Load feed settings.

    Args:
        path: Settings file (if None, loads config/feed_settings.yaml)

    Returns:
        FeedSettings
    """
    if path is None:
        config = load_config(SETTINGS_FILENAME)
    else:
        config = load_yaml(path)

    return settings_from_dict(config.get('become', {}))


def save_feed_settings(settings: FeedSettings, path: Optional[str | Path] = None) -> Path:
    """
    Save feed settings, replacing the file's 'become' section.

    Args:
        settings: Settings to save
        path: Settings file (if None, writes config/feed_settings.yaml)

    Returns:
        Path of the written file
    """
    if path is None:
        path = _get_config_dir() / SETTINGS_FILENAME
    path = Path(path)

    config = load_yaml(path) if path.exists() else {}
    config['become'] = asdict(settings)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config, f, allow_unicode=True, sort_keys=False)

    return path
