"""
Tests for dependency checking.
"""

import pytest
from unittest.mock import patch, MagicMock

from tmuxfeed.dependency_check import (
    find_executable,
    ToolStatus,
    check_program,
    check_tmux,
    require_tmux,
    require_terminal,
)
from tmuxfeed.exceptions import TerminalNotFoundError, TmuxNotFoundError


class TestFindExecutable:
    """Tests for find_executable."""

    def test_finds_existing_executable(self):
        with patch("shutil.which", return_value="/usr/bin/tmux"):
            assert find_executable("tmux") == "/usr/bin/tmux"

    def test_returns_none_for_missing(self):
        with patch("shutil.which", return_value=None):
            assert find_executable("nonexistent_binary_xyz") is None


class TestCheckTmux:
    """Tests for check_tmux."""

    def test_tmux_available(self):
        with patch("shutil.which", return_value="/usr/bin/tmux"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="tmux 3.4\n")
                available, path, version = check_tmux()

        assert available is True
        assert path == "/usr/bin/tmux"
        assert version == "tmux 3.4"
        assert mock_run.call_args[0][0] == ["/usr/bin/tmux", "-V"]

    def test_custom_location(self):
        with patch("shutil.which", return_value="/opt/tmux") as mock_which:
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="tmux next-3.5")
                check_tmux("/opt/tmux")

        mock_which.assert_called_once_with("/opt/tmux")

    def test_tmux_not_found(self):
        with patch("shutil.which", return_value=None):
            assert check_tmux() == (False, None, None)

    def test_version_failure_still_available(self):
        with patch("shutil.which", return_value="/usr/bin/tmux"):
            with patch("subprocess.run", side_effect=OSError("boom")):
                assert check_tmux() == (True, "/usr/bin/tmux", None)


class TestCheckProgram:
    """Tests for check_program."""

    def test_uses_version_flag(self):
        with patch("shutil.which", return_value="/usr/bin/xterm"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="XTerm(390)\n")
                status = check_program("xterm", "-version")

        assert status == ToolStatus(True, "/usr/bin/xterm", "XTerm(390)")
        assert mock_run.call_args[0][0] == ["/usr/bin/xterm", "-version"]

    def test_failed_version_call_has_no_version(self):
        with patch("shutil.which", return_value="/usr/bin/xterm"):
            with patch("subprocess.run", return_value=MagicMock(returncode=1, stdout="")):
                status = check_program("xterm", "-version")

        assert status.available is True
        assert status.version is None

    def test_missing_program(self):
        with patch("shutil.which", return_value=None):
            assert check_program("xterm", "-version").available is False


class TestRequire:
    """Tests for require_tmux / require_terminal."""

    def test_require_tmux_returns_path(self):
        with patch("shutil.which", return_value="/usr/bin/tmux"):
            with patch("subprocess.run", return_value=MagicMock(returncode=0, stdout="tmux 3.4")):
                assert require_tmux() == "/usr/bin/tmux"

    def test_require_tmux_raises(self):
        with patch("shutil.which", return_value=None):
            with pytest.raises(TmuxNotFoundError):
                require_tmux("tmux")

    def test_require_terminal_raises(self):
        with patch("shutil.which", return_value=None):
            with pytest.raises(TerminalNotFoundError):
                require_terminal("xterm")

    def test_require_terminal_returns_path(self):
        with patch("shutil.which", return_value="/usr/bin/xterm"):
            assert require_terminal("xterm") == "/usr/bin/xterm"
