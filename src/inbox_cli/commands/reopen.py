from pathlib import Path
from typing import Optional

import typer

from inbox_core.threads import reopen_thread as reopen_stored_thread

from ..utils import console, print_json, resolve_dir, run


def reopen_thread(
    thread_id: str = typer.Argument(..., help="Thread ID to reopen"),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Set a thread back to active."""
    thread = run(reopen_stored_thread(resolve_dir(directory), thread_id))
    if as_json:
        print_json(thread)
    else:
        console.print(f"Reopened thread {thread.id}", markup=False)
