"""
Read-only session inspection (plus kill) using libtmux.

Used by the CLI for listing sessions, reading back what a window printed,
and cleaning up. libtmux resolves the tmux binary from PATH.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import libtmux
from libtmux.exc import LibTmuxException
from libtmux._internal.query_list import MultipleObjectsReturned, ObjectDoesNotExist

from .address import SessionAddress
from .logging_config import get_logger


logger = get_logger("inspector")


@dataclass
class SessionInfo:
    name: str
    windows: List[str] = field(default_factory=list)
    attached: bool = False


class SessionInspector:
    """Inspects the tmux server an address points at."""

    def __init__(self, socket_path: Optional[str] = None):
        self._socket_path = socket_path
        self._server: Optional[libtmux.Server] = None

    @classmethod
    def for_address(cls, address: SessionAddress) -> "SessionInspector":
        return cls(socket_path=address.socket_path)

    @property
    def server(self) -> libtmux.Server:
        """Lazy-load the tmux server connection."""
        if self._server is None:
            if self._socket_path:
                self._server = libtmux.Server(socket_path=self._socket_path)
            else:
                self._server = libtmux.Server()
        return self._server

    def _get_session(self, name: str) -> Optional[libtmux.Session]:
        try:
            return self.server.sessions.get(session_name=name)
        except (LibTmuxException, ObjectDoesNotExist):
            return None

    def _get_window(self, address: SessionAddress) -> Optional[libtmux.Window]:
        sess = self._get_session(address.session_name)
        if sess is None:
            return None
        try:
            if address.window_name:
                return sess.windows.get(window_name=address.window_name)
            windows = sorted(sess.windows, key=lambda w: int(w.window_index))
            return windows[0] if windows else None
        except (LibTmuxException, ObjectDoesNotExist, MultipleObjectsReturned, ValueError):
            return None

    def list_sessions(self) -> List[SessionInfo]:
        try:
            sessions = list(self.server.sessions)
        except LibTmuxException:
            return []
        infos = []
        for sess in sessions:
            try:
                windows = [w.window_name or "" for w in sess.windows]
            except LibTmuxException:
                windows = []
            infos.append(SessionInfo(
                name=sess.session_name or "",
                windows=windows,
                attached=str(getattr(sess, "session_attached", "0") or "0") != "0",
            ))
        return infos

    def capture(self, address: SessionAddress, lines: int = 50) -> Optional[str]:
        """Return the last ``lines`` lines of the addressed window, or None."""
        window = self._get_window(address)
        if window is None:
            return None
        try:
            pane = window.active_pane or (window.panes[0] if window.panes else None)
            if pane is None:
                return None
            captured = pane.capture_pane(start=-lines)
        except LibTmuxException as e:
            logger.debug("capture-pane failed for %s: %s", address.target, e)
            return None
        if isinstance(captured, list):
            return "\n".join(captured)
        return captured

    def kill(self, address: SessionAddress) -> bool:
        """Kill the named window, or the whole session when no window is named."""
        try:
            if address.window_name:
                window = self._get_window(address)
                if window is None:
                    return False
                window.kill()
                return True
            sess = self._get_session(address.session_name)
            if sess is None:
                return False
            sess.kill()
            return True
        except LibTmuxException as e:
            logger.warning("Failed to kill %s: %s", address.target, e)
            return False
