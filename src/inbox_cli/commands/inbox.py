from pathlib import Path
from typing import Optional

import typer

from .list import show_threads


def inbox(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List threads that need attention (needs-reply or review)."""
    show_threads(directory, "inbox", as_json)
