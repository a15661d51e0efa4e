"""
Immutable settings for tmuxfeed.

All components take a FeedSettings instance at construction time, so
several orchestrators with different settings can coexist (e.g. in tests).
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .logging_config import get_logger


logger = get_logger("settings")


DEFAULT_SESSION_NAME = "default"
DEFAULT_WINDOW_NAME = "main"
DEFAULT_TERMINAL = "gnome-terminal"

# Marker printed by the pane-existence check
PANE_EXISTS_MARKER = "yes_exists"

_FLOAT_FIELDS = ("window_timeout", "poll_interval", "max_poll_interval", "command_timeout")
_TUPLE_FIELDS = ("terminal_opts", "unset_env")
_NULLABLE_FIELDS = ("window_timeout",)


@dataclass(frozen=True)
class FeedSettings:
    """Configuration shared by the address parser, client and orchestrator."""

    tmux_location: str = "tmux"
    session_prefix: str = ""
    default_window_name: str = DEFAULT_WINDOW_NAME
    terminal: str = DEFAULT_TERMINAL
    terminal_opts: Tuple[str, ...] = ()

    # Readiness wait (seconds). window_timeout=None waits forever.
    window_timeout: Optional[float] = 10.0
    poll_interval: float = 0.05
    max_poll_interval: float = 1.0

    # Timeout for blocking tmux calls
    command_timeout: float = 5.0

    # Removed from every subprocess environment so tmux can be driven
    # from inside an attached tmux client.
    unset_env: Tuple[str, ...] = field(default=("TMUX",))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedSettings":
        """Build settings from a config mapping, ignoring unknown keys.

        Values are converted to the field's type. A value that can't be
        converted is logged and the default kept. ``window_timeout: null``
        means wait without a limit; other null values keep the default.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                continue
            if value is None:
                if key in _NULLABLE_FIELDS:
                    kwargs[key] = None
                continue
            try:
                kwargs[key] = _convert(key, value)
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid config value %s=%r", key, value)
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "FeedSettings":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)


def _convert(key: str, value: Any) -> Any:
    if key in _TUPLE_FIELDS:
        if isinstance(value, str):
            return tuple(value.split())
        return tuple(str(v) for v in value)
    if key in _FLOAT_FIELDS:
        if isinstance(value, bool):
            raise TypeError(key)
        return float(value)
    return str(value)
