"""
Availability checks for the external programs tmuxfeed drives: the tmux
binary and the terminal emulator that attaches to new sessions.
"""

import shutil
import subprocess
from typing import NamedTuple, Optional

from .exceptions import TerminalNotFoundError, TmuxNotFoundError


# Seconds allowed for a "--version" style call
VERSION_TIMEOUT = 5


class ToolStatus(NamedTuple):
    available: bool
    path: Optional[str] = None
    version: Optional[str] = None


def find_executable(name: str) -> Optional[str]:
    """Resolve a bare program name or a path to an executable, or None."""
    return shutil.which(name)


def check_program(location: str, version_flag: str) -> ToolStatus:
    """Locate a program and ask it for its version.

    A program that is found but whose version call fails is still
    reported as available, with no version.
    """
    path = find_executable(location)
    if not path:
        return ToolStatus(False)

    try:
        result = subprocess.run(
            [path, version_flag],
            capture_output=True,
            text=True,
            timeout=VERSION_TIMEOUT,
        )
    except (subprocess.SubprocessError, OSError):
        return ToolStatus(True, path)
    version = result.stdout.strip() if result.returncode == 0 else None
    return ToolStatus(True, path, version or None)


def check_tmux(location: str = "tmux") -> ToolStatus:
    """Report whether the configured tmux binary exists and its version."""
    return check_program(location, "-V")


def require_tmux(location: str = "tmux") -> str:
    """Return the resolved tmux path.

    Raises:
        TmuxNotFoundError: ``location`` does not resolve to an executable
    """
    status = check_tmux(location)
    if not status.available:
        raise TmuxNotFoundError(
            f"tmux is required but '{location}' was not found. "
            "Install it with: brew install tmux (macOS) or apt install tmux (Linux)"
        )
    return status.path


def require_terminal(name: str) -> str:
    """Return the resolved path of a terminal emulator.

    Raises:
        TerminalNotFoundError: ``name`` does not resolve to an executable
    """
    path = find_executable(name)
    if not path:
        raise TerminalNotFoundError(f"terminal emulator '{name}' was not found")
    return path
