"""
Pytest configuration for tmuxfeed tests.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end test against a real tmux server"
    )
    config.addinivalue_line(
        "markers", "requires_tmux: mark test as requiring tmux"
    )


@pytest.fixture
def tmux_socket():
    """Path of a private tmux server socket, killed after the test."""
    if shutil.which("tmux") is None:
        pytest.skip("tmux not available")

    socket_dir = tempfile.mkdtemp(prefix="tmuxfeed-e2e-")
    socket_path = str(Path(socket_dir) / "tmux.sock")
    try:
        yield socket_path
    finally:
        subprocess.run(
            ["tmux", "-S", socket_path, "kill-server"],
            capture_output=True,
            timeout=5,
        )
        shutil.rmtree(socket_dir, ignore_errors=True)
