"""
Configuration loader
"""
import logging
from pathlib import Path
from typing import Optional

import yaml

from scoreboard.models import ContestSettings


DEFAULT_CONFIG_PATH = "config/contest.yaml"


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> ContestSettings:
    """
    Load contest settings from YAML file

    Args:
        config_path: Path to config file

    Returns:
        ContestSettings object

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return ContestSettings(**data)


def load_settings_or_default(config_path: Optional[str] = None) -> ContestSettings:
    """Load settings, falling back to defaults when the file is missing"""
    try:
        return load_settings(config_path or DEFAULT_CONFIG_PATH)
    except FileNotFoundError as e:
        logging.getLogger(__name__).warning(f"⚠️ {e}, using default settings")
        return ContestSettings()


def setup_logging(settings: ContestSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )
