"""
Session commands: ls, capture, kill.
"""

from typing import Annotated

import typer
from rich import print as rprint
from rich.table import Table

from ..address import parse_address
from ..inspector import SessionInspector
from ._shared import app, console, SocketOption, SpecArgument, _settings


@app.command("ls")
def list_sessions(socket: SocketOption = None):
    """List tmux sessions and their windows."""
    inspector = SessionInspector(socket_path=parse_address("", socket).socket_path)
    sessions = inspector.list_sessions()
    if not sessions:
        rprint("[dim]No sessions[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Session")
    table.add_column("Windows")
    table.add_column("Attached")
    for info in sessions:
        table.add_row(info.name, ", ".join(info.windows), "yes" if info.attached else "")
    console.print(table)


@app.command()
def capture(
    spec: SpecArgument = "",
    lines: Annotated[int, typer.Option("--lines", "-n", help="Lines of scrollback")] = 50,
    socket: SocketOption = None,
):
    """Print what the addressed window currently shows."""
    address = parse_address(spec, socket, prefix=_settings().session_prefix)
    content = SessionInspector.for_address(address).capture(address, lines=lines)
    if content is None:
        rprint(f"[red]Error: no window {address.target}[/red]")
        raise typer.Exit(code=1)
    typer.echo(content)


@app.command()
def kill(
    spec: SpecArgument = "",
    socket: SocketOption = None,
):
    """Kill the addressed window, or the whole session if no window is given."""
    address = parse_address(spec, socket, prefix=_settings().session_prefix)
    if not SessionInspector.for_address(address).kill(address):
        rprint(f"[red]Error: nothing to kill at {address.target}[/red]")
        raise typer.Exit(code=1)
    what = "window" if address.window_name else "session"
    rprint(f"[green]✓[/green] Killed {what} [bold]{address.target}[/bold]")
