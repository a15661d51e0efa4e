"""
Session and window liveness.

tmux is the source of truth: every check re-queries it and parses the
listing text. Nothing is cached between calls. Anything unexpected in the
output (empty, error text, stray whitespace) means "does not exist".
"""

from .address import SessionAddress
from .protocols import TmuxControlInterface
from .settings import PANE_EXISTS_MARKER


class LivenessChecker:
    """Answers "does this session/window exist?" for an address."""

    def __init__(self, client: TmuxControlInterface):
        self.client = client

    def session_alive(self, address: SessionAddress) -> bool:
        output = self.client.list_session_names(address)
        if not output:
            return False
        return address.session_name in output.split("\n")

    def window_alive(self, address: SessionAddress) -> bool:
        # Only a named window is looked up; "first window" is satisfied by any
        # existing session, since a new session always has one window.
        if not address.window_name:
            return True
        return self.client.pane_markers(address) == f"{PANE_EXISTS_MARKER}\n"
