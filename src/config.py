"""
Persistent editor settings.

config.json holds two things the canvas reads at page load: an "edge_style"
section merged over EdgeStyle defaults, and an "oriented" flag deciding
whether arrowheads are drawn. A missing or unreadable file means defaults.
"""

import json
import logging
import os
from typing import Optional

from src.edge.style import EdgeStyle
from src.paths import get_config_path

ORIENTED_ENV_VAR = "GRAPH_ORIENTED"

_TRUE_VALUES = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)


def load_config() -> dict:
    """Settings dict from config.json; {} when the file is absent or unusable."""
    config_path = get_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {config_path}: expected an object, got {type(data).__name__}")
        return {}
    return data


def save_config(config: dict) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)
    logger.info(f"Saved editor settings to {config_path}")


def get_edge_style(config: Optional[dict] = None) -> EdgeStyle:
    """Build the edge style from the 'edge_style' section, falling back to defaults."""
    if config is None:
        config = load_config()
    section = config.get("edge_style") or {}
    if not isinstance(section, dict):
        return EdgeStyle()
    return EdgeStyle.from_dict(section)


def set_edge_style(style: EdgeStyle) -> None:
    config = load_config()
    config["edge_style"] = style.to_dict()
    save_config(config)


def is_oriented_default() -> bool:
    """
    Whether graphs start out oriented.

    Priority:
    1. Environment variable GRAPH_ORIENTED
    2. 'oriented' in config.json
    """
    env_value = os.environ.get(ORIENTED_ENV_VAR)
    if env_value:
        return env_value.strip().lower() in _TRUE_VALUES

    config = load_config()
    return bool(config.get("oriented", False))


def set_oriented_default(oriented: bool) -> None:
    config = load_config()
    config["oriented"] = bool(oriented)
    save_config(config)
