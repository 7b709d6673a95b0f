import logging
import os
from typing import Optional

import yaml
from pydantic import ValidationError

from dfree.display.theme import Theme
from dfree.errors import ConfigError

logger = logging.getLogger(__name__)


class Config:
    mounts_file = os.getenv("DFREE_MOUNTS_FILE", "/proc/self/mounts")
    bar_width = os.getenv("DFREE_BAR_WIDTH", "20")
    theme_file = os.getenv("DFREE_THEME_FILE")

config = Config()


def find_theme_file(path: Optional[str] = None) -> Optional[str]:
    if path:
        return path
    if config.theme_file:
        return config.theme_file
    for candidate in (os.path.expanduser("~/.config/dfree/theme.yaml"), "/etc/dfree/theme.yaml"):
        if os.path.exists(candidate):
            return candidate
    return None


def load_theme(path: Optional[str] = None) -> Theme:
    """
    Builds the theme from the defaults and an optional YAML file.
    Lookup order: path, $DFREE_THEME_FILE, ~/.config/dfree/theme.yaml, /etc/dfree/theme.yaml.
    """
    values = {"bar_width": config.bar_width}

    theme_path = find_theme_file(path)
    if theme_path:
        logger.debug(f"Loading theme from {theme_path}")
        try:
            with open(theme_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load theme {theme_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Theme {theme_path} must be a mapping")
        values.update(data)

    try:
        return Theme.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid theme: {e}") from e
