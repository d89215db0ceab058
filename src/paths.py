"""
Where the graph editor keeps its config.json.

Running from a checkout, the file sits in the project root next to app.py.
A PyInstaller build looks next to the executable instead, so edge style
overrides survive rebuilds. GRAPH_EDITOR_CONFIG points at any other file.
"""

import os
import sys
from pathlib import Path

CONFIG_PATH_ENV_VAR = "GRAPH_EDITOR_CONFIG"


def get_app_dir() -> Path:
    """Project root in a checkout, the executable's folder in a frozen build."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_app_dir() / "config.json"
