"""
Session addressing.

A session specification is the compact "session[:window]" string a caller
hands us. It is parsed once into a SessionAddress; the tmux target string
is derived from it on demand and never cached, because the session and
window set changes while an orchestration run is in progress.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .settings import DEFAULT_SESSION_NAME


# Characters tmux replaces with "_" in session names
_TMUX_NAME_REWRITE = str.maketrans(".:", "__")


@dataclass(frozen=True)
class SessionAddress:
    """Where a body should be delivered.

    Attributes:
        session_name: Full tmux session name (prefix already applied), never empty
        window_name: Exact window name, or None for "first window"
        socket_path: Absolute path of an alternate tmux socket, or None
    """

    session_name: str
    window_name: Optional[str] = None
    socket_path: Optional[str] = None

    @property
    def target(self) -> str:
        return target(self)


def _normalize_socket(socket: Optional[str]) -> Optional[str]:
    if not socket:
        return None
    return os.path.abspath(os.path.expanduser(socket))


def parse_address(
    raw_spec: Optional[str],
    socket: Optional[str] = None,
    prefix: str = "",
    window: Optional[str] = None,
) -> SessionAddress:
    """Parse "session[:window]" into a SessionAddress.

    Never raises: an empty or malformed spec maps to the default session.
    A non-empty ``window`` overrides the window field of the spec.

    tmux stores "." and ":" in a session name as "_", so the name is
    rewritten the same way or it would never match what tmux lists.
    """
    fields = (raw_spec or "").split(":")
    session = fields[0] or DEFAULT_SESSION_NAME
    window_name = fields[1] if len(fields) > 1 and fields[1] else None
    if window:
        window_name = window
    return SessionAddress(
        session_name=f"{prefix}{session}".translate(_TMUX_NAME_REWRITE),
        window_name=window_name,
        socket_path=_normalize_socket(socket),
    )


def target(address: SessionAddress) -> str:
    """Return the tmux target for an address.

    "=" forces an exact window-name match; "^" selects the first window.
    """
    if address.window_name:
        return f"{address.session_name}:={address.window_name}"
    return f"{address.session_name}:^"
