"""
Terminal emulator launch.

Opens a visible terminal attached to a tmux target so the user can watch
(and take over) what is typed into it.
"""

import os
from typing import List, Optional, Sequence

from .address import SessionAddress, target
from .dependency_check import find_executable
from .logging_config import get_logger
from .protocols import TmuxControlInterface


logger = get_logger("terminal")

# Emulators that take "-T title -e program args..." instead of "-- program args..."
TITLE_EXEC_TERMINALS = frozenset({"xterm"})


def terminal_command(
    terminal: str,
    tmux_location: str,
    tmux_target: str,
    terminal_opts: Sequence[str] = (),
) -> List[str]:
    """Build the argv that opens ``terminal`` attached to ``tmux_target``."""
    attach = [tmux_location, "attach-session", "-t", tmux_target]
    argv = [terminal, *terminal_opts]
    if os.path.basename(terminal) in TITLE_EXEC_TERMINALS:
        return argv + ["-T", tmux_target, "-e", *attach]
    return argv + ["--", *attach]


def launch_terminal(
    client: TmuxControlInterface,
    address: SessionAddress,
    terminal: Optional[str] = None,
):
    """Open a terminal attached to the address.

    Returns:
        The process handle, or None if the terminal could not be started
    """
    settings = client.settings
    terminal = terminal or settings.terminal
    if find_executable(terminal) is None:
        logger.warning("Terminal '%s' not found, not opening a window", terminal)
        return None
    argv = terminal_command(
        terminal, settings.tmux_location, target(address), settings.terminal_opts
    )
    logger.info("Opening %s on %s", terminal, target(address))
    return client.spawn_program(argv)
