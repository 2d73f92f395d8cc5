from pathlib import Path
from typing import Optional

import typer

from inbox_core.models import THREAD_FILTERS
from inbox_core.threads import list_threads as list_stored_threads

from ..format import render_thread_list
from ..utils import console, print_json, resolve_dir, run


def validate_filter(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in THREAD_FILTERS:
        raise typer.BadParameter(f"must be one of: {', '.join(THREAD_FILTERS)}")
    return value


def show_threads(directory: Optional[Path], status: Optional[str], as_json: bool) -> None:
    threads = run(list_stored_threads(resolve_dir(directory), status))
    if as_json:
        print_json(threads)
    else:
        console.print(render_thread_list(threads))


def list_threads(
    status: Optional[str] = typer.Option(
        None,
        "--status",
        callback=validate_filter,
        help=f"Filter by status ({', '.join(THREAD_FILTERS)})",
    ),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List threads."""
    show_threads(directory, status, as_json)
