"""
Config commands: init, show, path.
"""

from typing import Annotated

import typer
from rich import print as rprint

from .. import config as config_module
from ._shared import config_app


CONFIG_TEMPLATE = """\
# tmuxfeed configuration
# Location: ~/.tmuxfeed/config.yaml

# tmux binary (name on PATH or absolute path)
# tmux_location: tmux

# Prepended to every session name
# session_prefix: ""

# Name of the first window of new sessions
# default_window_name: main

# Terminal opened when a new session is created
# terminal: gnome-terminal
# terminal_opts: []

# Seconds to wait for a new window to show up (null waits forever)
# window_timeout: 10
"""


@config_app.callback(invoke_without_command=True)
def config_default(ctx: typer.Context):
    """Show the current configuration."""
    if ctx.invoked_subcommand is None:
        config_show()


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config")
    ] = False,
):
    """Create a commented config file."""
    path = config_module.CONFIG_PATH
    if path.exists() and not force:
        rprint(f"[yellow]Config already exists:[/yellow] {path}")
        rprint("Use --force to overwrite")
        raise typer.Exit(code=1)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(CONFIG_TEMPLATE)
    rprint(f"[green]✓[/green] Wrote {path}")


@config_app.command("show")
def config_show():
    """Print the effective settings."""
    data = config_module.load_config()
    settings = config_module.load_settings(data)
    if not data:
        rprint(f"[dim]No config at {config_module.CONFIG_PATH}; using defaults[/dim]")
    for name, value in vars(settings).items():
        rprint(f"  {name}: {value!r}")


@config_app.command("path")
def config_path():
    """Print the config file location."""
    typer.echo(str(config_module.CONFIG_PATH))
