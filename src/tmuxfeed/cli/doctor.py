"""
Doctor command: report external program availability.
"""

import typer
from rich import print as rprint

from ..dependency_check import check_tmux, find_executable
from ._shared import app, _settings


@app.command()
def doctor():
    """Check that tmux and the terminal emulator are installed."""
    settings = _settings()
    ok = True

    tmux = check_tmux(settings.tmux_location)
    if tmux.available:
        rprint(f"[green]✓[/green] tmux: {tmux.path} ({tmux.version or 'unknown version'})")
    else:
        rprint(f"[red]✗[/red] tmux: '{settings.tmux_location}' not found")
        ok = False

    terminal_path = find_executable(settings.terminal)
    if terminal_path:
        rprint(f"[green]✓[/green] terminal: {terminal_path}")
    else:
        rprint(f"[yellow]![/yellow] terminal: '{settings.terminal}' not found "
               "(new sessions will not be opened in a window)")

    if not ok:
        raise typer.Exit(code=1)
