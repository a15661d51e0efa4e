"""
Feed command: send a body into a session window.
"""

import dataclasses
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print as rprint

from ..delivery import DeliveryResult
from ..dependency_check import require_terminal
from ..exceptions import TmuxfeedError
from ..orchestrator import SessionOrchestrator
from ..tmux_client import TmuxClient
from ._shared import app, SocketOption, SpecArgument, _settings


@app.command()
def send(
    spec: SpecArgument = "",
    file: Annotated[
        Optional[Path],
        typer.Argument(help="File holding the body ('-' or omitted reads stdin)"),
    ] = None,
    window: Annotated[
        Optional[str], typer.Option("--window", "-w", help="Window name (overrides SPEC)")
    ] = None,
    socket: SocketOption = None,
    terminal: Annotated[
        Optional[str],
        typer.Option("--terminal", "-t", help="Terminal emulator to open for new sessions"),
    ] = None,
    no_terminal: Annotated[
        bool, typer.Option("--no-terminal", help="Never open a terminal window")
    ] = False,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Seconds to wait for the window to appear"),
    ] = None,
    no_timeout: Annotated[
        bool, typer.Option("--no-timeout", help="Wait for the window without a time limit")
    ] = False,
):
    """Send a block of shell text into a tmux window, creating it if needed."""
    if file is None or str(file) == "-":
        body = sys.stdin.read()
    else:
        try:
            body = file.read_text()
        except OSError as e:
            rprint(f"[red]Error: cannot read {file}: {e}[/red]")
            raise typer.Exit(code=1)

    settings = _settings(terminal=terminal, window_timeout=timeout)
    if no_timeout:
        settings = dataclasses.replace(settings, window_timeout=None)
    orchestrator = SessionOrchestrator(TmuxClient(settings))
    address = orchestrator.address(spec, socket=socket, window=window)

    try:
        if terminal and not no_terminal and address.socket_path is None:
            require_terminal(terminal)
        report = orchestrator.execute(address, body, open_terminal=not no_terminal)
    except TmuxfeedError as e:
        rprint(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if report.session_created:
        rprint(f"[dim]Created session[/dim] [bold]{address.session_name}[/bold]")
    if report.window_created:
        rprint(f"[dim]Created window[/dim] [bold]{report.target}[/bold]")
    if report.terminal_launched:
        rprint("[dim]Opened terminal[/dim]")

    if report.delivery is DeliveryResult.SKIPPED:
        rprint(f"[yellow]Window {report.target} disappeared; body not sent[/yellow]")
        raise typer.Exit(code=2)
    if report.delivery is DeliveryResult.PARTIAL:
        rprint(
            f"[yellow]Sent {report.lines - report.failed_lines} of {report.lines} line(s) "
            f"to {report.target}; {report.failed_lines} failed[/yellow]"
        )
        raise typer.Exit(code=1)
    rprint(f"[green]✓[/green] Sent {report.lines} line(s) to [bold]{report.target}[/bold]")
