"""
Subprocess boundary to the tmux control program.

Every tmux invocation made by tmuxfeed goes through TmuxClient. Arguments
are passed as a list, never through a shell, so session names, window
names and body text cannot be reinterpreted as extra arguments.

Three invocation modes:
    spawn     non-blocking, output discarded (session/window creation)
    dispatch  blocking, output discarded, returns success (send-keys,
              set-window-option; keeps per-line ordering)
    query     blocking, returns stdout as text (listing commands)
"""

import os
import subprocess
from typing import Dict, List, Optional, Sequence

from .address import SessionAddress, target
from .logging_config import get_logger
from .settings import FeedSettings, PANE_EXISTS_MARKER


logger = get_logger("tmux_client")


class TmuxClient:
    """Runs tmux commands for a given address, honouring its socket."""

    def __init__(self, settings: Optional[FeedSettings] = None):
        self.settings = settings or FeedSettings()

    # ------------------------------------------------------------------
    # argv / environment
    # ------------------------------------------------------------------

    def command(self, address: SessionAddress, *args: str) -> List[str]:
        """Build the full argv for a tmux command."""
        argv = [self.settings.tmux_location]
        if address.socket_path:
            argv += ["-S", address.socket_path]
        argv.extend(args)
        return argv

    def environment(self, overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Environment for child processes: ours minus settings.unset_env."""
        env = {k: v for k, v in os.environ.items() if k not in self.settings.unset_env}
        if overrides:
            env.update(overrides)
        return env

    # ------------------------------------------------------------------
    # Invocation modes
    # ------------------------------------------------------------------

    def spawn_program(
        self, argv: Sequence[str], env: Optional[Dict[str, str]] = None
    ) -> Optional[subprocess.Popen]:
        """Start any program without waiting for it.

        Returns:
            The process handle, or None if it could not be started
        """
        logger.debug("spawn: %s", list(argv))
        try:
            return subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=self.environment(env),
                start_new_session=True,
            )
        except OSError as e:
            logger.warning("Failed to start %s: %s", argv[0], e)
            return None

    def spawn(self, address: SessionAddress, *args: str) -> Optional[subprocess.Popen]:
        return self.spawn_program(self.command(address, *args))

    def dispatch(self, address: SessionAddress, *args: str) -> bool:
        """Run a tmux command to completion, discarding its output."""
        argv = self.command(address, *args)
        logger.debug("dispatch: %s", argv)
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.settings.command_timeout,
                env=self.environment(),
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("tmux %s failed: %s", args[0] if args else "", e)
            return False
        if result.returncode != 0:
            logger.debug("tmux %s exited %d: %s", args[0] if args else "",
                         result.returncode, result.stderr.strip())
        return result.returncode == 0

    def query(self, address: SessionAddress, *args: str) -> str:
        """Run a tmux command and return its stdout.

        Failures (missing binary, timeout, non-zero exit) yield whatever
        output was produced, possibly the empty string.
        """
        argv = self.command(address, *args)
        logger.debug("query: %s", argv)
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.settings.command_timeout,
                env=self.environment(),
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("tmux %s failed: %s", args[0] if args else "", e)
            return ""
        return result.stdout or ""

    # ------------------------------------------------------------------
    # tmux commands
    # ------------------------------------------------------------------

    def new_session(self, address: SessionAddress, start_directory: str) -> None:
        self.spawn(
            address,
            "new-session", "-d",
            "-c", start_directory,
            "-s", address.session_name,
            "-n", self.settings.default_window_name,
        )

    def new_window(self, address: SessionAddress, start_directory: str) -> None:
        # Without -t tmux picks the current session; address the session
        # explicitly so the window lands where it will be looked up.
        self.spawn(
            address,
            "new-window",
            "-t", f"{address.session_name}:",
            "-c", start_directory,
            "-n", address.window_name or self.settings.default_window_name,
        )

    def set_window_option(self, address: SessionAddress, option: str, value: str) -> bool:
        return self.dispatch(address, "set-window-option", "-t", target(address), option, value)

    def send_literal(self, address: SessionAddress, text: str) -> bool:
        """Type text into the addressed window, followed by a newline.

        "--" ends option parsing so a line such as "-n" or "- item" is
        typed rather than read as a send-keys flag.
        """
        return self.dispatch(address, "send-keys", "-l", "-t", target(address), "--", text, "\n")

    def list_session_names(self, address: SessionAddress) -> str:
        return self.query(address, "ls", "-F", "#S")

    def pane_markers(self, address: SessionAddress) -> str:
        return self.query(address, "list-panes", "-F", PANE_EXISTS_MARKER, "-t", target(address))
