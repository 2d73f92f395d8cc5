from pathlib import Path
from typing import Optional

import typer

from inbox_core.threads import get_thread

from ..format import render_thread
from ..utils import console, err_console, print_json, resolve_dir, run


def show_thread(
    thread_id: str = typer.Argument(..., help="Thread ID to show"),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show a thread and its messages."""
    thread = run(get_thread(resolve_dir(directory), thread_id))
    if not thread:
        err_console.print(f"Thread {thread_id} not found", style="red", markup=False)
        raise typer.Exit(code=1)

    if as_json:
        print_json(thread)
    else:
        console.print(render_thread(thread))
