"""
Configuration file loading for tmuxfeed.

Config file: ~/.tmuxfeed/config.yaml (override with TMUXFEED_CONFIG)

Example:
    tmux_location: /usr/local/bin/tmux
    session_prefix: "org-"
    default_window_name: main
    terminal: xterm
    window_timeout: 15
"""

import os
from pathlib import Path
from typing import Optional

import yaml

from .settings import FeedSettings


CONFIG_PATH = Path(
    os.environ.get("TMUXFEED_CONFIG", Path.home() / ".tmuxfeed" / "config.yaml")
)


def load_config() -> dict:
    """Load configuration from the config file.

    Returns:
        Config dict, or empty dict if the file is missing or invalid
    """
    if not CONFIG_PATH.exists():
        return {}

    try:
        with open(CONFIG_PATH) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, IOError):
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def save_config(data: dict) -> None:
    """Write the config dict to the config file, creating its directory."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def load_settings(data: Optional[dict] = None) -> FeedSettings:
    """Build FeedSettings from the config file (or an already loaded dict)."""
    if data is None:
        data = load_config()
    return FeedSettings.from_dict(data)
