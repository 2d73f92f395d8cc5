from pathlib import Path
from typing import Optional

import typer

from inbox_core.threads import create_thread

from ..utils import print_json, resolve_dir, run


def new_thread(
    title: str = typer.Argument(..., help="Thread title"),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Create a new thread."""
    thread = run(create_thread(resolve_dir(directory), title))
    if as_json:
        print_json(thread)
    else:
        typer.echo(thread.id)
