"""
CLI interface for tmuxfeed using Typer.
"""

from ._shared import app, main_callback  # noqa: F401

# Import submodules to register their commands with the Typer apps
from . import feed  # noqa: F401
from . import sessions  # noqa: F401
from . import doctor  # noqa: F401
from . import config  # noqa: F401


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
