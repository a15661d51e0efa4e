"""
Exception types raised by tmuxfeed.

Address parsing and liveness probing never raise; these cover the
conditions a caller can actually act on.
"""

from typing import Optional


class TmuxfeedError(Exception):
    """Base class for all tmuxfeed errors."""


class TmuxNotFoundError(TmuxfeedError):
    """Raised when the tmux control program cannot be found."""


class TerminalNotFoundError(TmuxfeedError):
    """Raised when the requested terminal emulator cannot be found."""


class WindowTimeoutError(TmuxfeedError):
    """Raised when a window does not become visible before the deadline."""

    def __init__(self, target: str, timeout: Optional[float]):
        self.target = target
        self.timeout = timeout
        super().__init__(
            f"'{target}' did not appear within {timeout:.1f}s"
            if timeout is not None
            else f"'{target}' did not appear"
        )


class WaitCancelledError(TmuxfeedError):
    """Raised when a caller cancels the wait for a window."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"wait for window '{target}' was cancelled")
