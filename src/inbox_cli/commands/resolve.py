from pathlib import Path
from typing import Optional

import typer

from inbox_core.threads import resolve_thread as resolve_stored_thread

from ..utils import console, print_json, resolve_dir, run


def resolve_thread(
    thread_id: str = typer.Argument(..., help="Thread ID to resolve"),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Mark a thread as resolved."""
    thread = run(resolve_stored_thread(resolve_dir(directory), thread_id))
    if as_json:
        print_json(thread)
    else:
        console.print(f"Resolved thread {thread.id}", markup=False)
