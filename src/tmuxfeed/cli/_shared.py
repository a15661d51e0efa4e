"""
Shared CLI state: Typer apps, console, options, and utilities.
"""

from typing import Annotated, Optional

import typer
from rich.console import Console

from ..config import load_settings
from ..logging_config import setup_cli_logging
from ..settings import FeedSettings

# Main app
app = typer.Typer(
    name="tmuxfeed",
    help="Type shell blocks into persistent, watchable tmux sessions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage configuration",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")

# Console for rich output
console = Console()

SocketOption = Annotated[
    Optional[str],
    typer.Option(
        "--socket",
        "-S",
        help="Path of an alternate tmux server socket",
    ),
]

SpecArgument = Annotated[
    str,
    typer.Argument(help="Session spec: SESSION[:WINDOW] (empty means 'default')"),
]


def _settings(**overrides) -> FeedSettings:
    """Settings from the config file with command-line overrides applied."""
    return load_settings().with_overrides(**overrides)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every tmux command")
    ] = False,
):
    """Type shell blocks into persistent, watchable tmux sessions."""
    setup_cli_logging(verbose=verbose)
