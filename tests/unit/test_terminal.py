"""Tests for terminal module."""

from unittest.mock import patch

from tmuxfeed.address import SessionAddress
from tmuxfeed.interfaces import MockTmuxControl
from tmuxfeed.settings import FeedSettings
from tmuxfeed.terminal import launch_terminal, terminal_command


class TestTerminalCommand:
    """Tests for terminal_command."""

    def test_double_dash_style(self):
        assert terminal_command("gnome-terminal", "tmux", "work:=edit") == [
            "gnome-terminal", "--", "tmux", "attach-session", "-t", "work:=edit",
        ]

    def test_xterm_takes_title_and_exec(self):
        assert terminal_command("xterm", "tmux", "work:^") == [
            "xterm", "-T", "work:^", "-e", "tmux", "attach-session", "-t", "work:^",
        ]

    def test_xterm_by_path(self):
        argv = terminal_command("/usr/bin/xterm", "/opt/tmux", "work:^")
        assert argv[1:3] == ["-T", "work:^"]
        assert argv[4] == "/opt/tmux"

    def test_terminal_opts_come_first(self):
        argv = terminal_command("kitty", "tmux", "w:^", ["--single-instance"])
        assert argv[:3] == ["kitty", "--single-instance", "--"]


class TestLaunchTerminal:
    """Tests for launch_terminal."""

    def test_spawns_configured_terminal(self):
        mock = MockTmuxControl(settings=FeedSettings(terminal="alacritty"))
        with patch("tmuxfeed.terminal.find_executable", return_value="/usr/bin/alacritty"):
            handle = launch_terminal(mock, SessionAddress("work"))

        assert handle is not None
        assert mock.spawned == [["alacritty", "--", "tmux", "attach-session", "-t", "work:^"]]

    def test_missing_terminal_returns_none(self):
        mock = MockTmuxControl()
        with patch("tmuxfeed.terminal.find_executable", return_value=None):
            assert launch_terminal(mock, SessionAddress("work")) is None

        assert mock.spawned == []
