"""
Interface re-exports and an in-memory tmux fake for tests.
"""

from typing import Dict, List, Optional, Sequence

from .address import SessionAddress, target
from .protocols import TmuxControlInterface
from .settings import FeedSettings, PANE_EXISTS_MARKER


__all__ = ["TmuxControlInterface", "MockTmuxControl"]


class MockTmuxControl:
    """In-memory stand-in for TmuxClient.

    Keeps a table of sessions -> window names and answers the listing
    queries with the same text tmux would print. Every command is recorded
    in ``calls`` as the argv tmux would have received (without the binary).

    ``window_delay`` hides newly created windows from the pane listing for
    that many lookups, to imitate tmux creating them asynchronously.
    Lines listed in ``failing_lines`` are rejected by send_literal.
    """

    def __init__(
        self,
        settings: Optional[FeedSettings] = None,
        sessions: Optional[Dict[str, List[str]]] = None,
        window_delay: int = 0,
        failing_lines: Sequence[str] = (),
    ):
        self.settings = settings or FeedSettings()
        self.sessions: Dict[str, List[str]] = {
            name: list(windows) for name, windows in (sessions or {}).items()
        }
        self.window_delay = window_delay
        self.failing_lines = set(failing_lines)
        self._pending: Dict[tuple, int] = {}
        self.calls: List[List[str]] = []
        self.spawned: List[List[str]] = []
        self.sent: List[str] = []
        self.options: Dict[str, Dict[str, str]] = {}

    def _record(self, address: SessionAddress, *args: str) -> None:
        argv = ["-S", address.socket_path] if address.socket_path else []
        self.calls.append(argv + list(args))

    def commands(self, name: str) -> List[List[str]]:
        """Recorded calls whose tmux command is ``name``."""
        result = []
        for argv in self.calls:
            args = argv[2:] if argv[:1] == ["-S"] else argv
            if args and args[0] == name:
                result.append(args)
        return result

    def spawn_program(self, argv: Sequence[str], env=None):
        self.spawned.append(list(argv))
        return object()

    def new_session(self, address: SessionAddress, start_directory: str) -> None:
        self._record(address, "new-session", "-d", "-c", start_directory,
                     "-s", address.session_name, "-n", self.settings.default_window_name)
        self.sessions.setdefault(address.session_name, [self.settings.default_window_name])

    def new_window(self, address: SessionAddress, start_directory: str) -> None:
        name = address.window_name or self.settings.default_window_name
        self._record(address, "new-window", "-t", f"{address.session_name}:",
                     "-c", start_directory, "-n", name)
        if address.session_name not in self.sessions:
            return
        self.sessions[address.session_name].append(name)
        if self.window_delay:
            self._pending[(address.session_name, name)] = self.window_delay

    def set_window_option(self, address: SessionAddress, option: str, value: str) -> bool:
        self._record(address, "set-window-option", "-t", target(address), option, value)
        self.options.setdefault(target(address), {})[option] = value
        return True

    def send_literal(self, address: SessionAddress, text: str) -> bool:
        self._record(address, "send-keys", "-l", "-t", target(address), "--", text, "\n")
        if text in self.failing_lines:
            return False
        self.sent.append(text)
        return True

    def list_session_names(self, address: SessionAddress) -> str:
        self._record(address, "ls", "-F", "#S")
        return "".join(f"{name}\n" for name in self.sessions)

    def pane_markers(self, address: SessionAddress) -> str:
        self._record(address, "list-panes", "-F", PANE_EXISTS_MARKER, "-t", target(address))
        windows = self.sessions.get(address.session_name)
        if windows is None or address.window_name not in windows:
            return ""
        key = (address.session_name, address.window_name)
        if self._pending.get(key):
            self._pending[key] -= 1
            return ""
        return f"{PANE_EXISTS_MARKER}\n"
