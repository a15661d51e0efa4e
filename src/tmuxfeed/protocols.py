"""
Protocol definitions for the tmux boundary.

These interfaces allow dependency injection for testing, so the liveness
checker, delivery and orchestrator can run against an in-memory fake
instead of a real tmux server.
"""

from typing import Protocol, Sequence, runtime_checkable

from .address import SessionAddress
from .settings import FeedSettings


@runtime_checkable
class TmuxControlInterface(Protocol):
    """Interface for the tmux commands tmuxfeed issues."""

    settings: FeedSettings

    def spawn_program(self, argv: Sequence[str], env=None):
        """Start a program without waiting. Returns a handle or None."""
        ...

    def new_session(self, address: SessionAddress, start_directory: str) -> None:
        """Create the address's session (detached, non-blocking)."""
        ...

    def new_window(self, address: SessionAddress, start_directory: str) -> None:
        """Create the address's window (non-blocking)."""
        ...

    def set_window_option(self, address: SessionAddress, option: str, value: str) -> bool:
        """Set a window option on the address's target."""
        ...

    def send_literal(self, address: SessionAddress, text: str) -> bool:
        """Type text plus a newline into the address's target."""
        ...

    def list_session_names(self, address: SessionAddress) -> str:
        """Return the session listing, one name per line."""
        ...

    def pane_markers(self, address: SessionAddress) -> str:
        """Return the pane-existence marker output for the address's target."""
        ...
