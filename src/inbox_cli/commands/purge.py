from pathlib import Path
from typing import Optional

import typer

from inbox_core.threads import purge_threads

from ..utils import console, print_json, resolve_dir, run


def purge(
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be purged without removing"),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Permanently remove all resolved threads."""
    purged = run(purge_threads(resolve_dir(directory), dry_run=dry_run))
    if as_json:
        print_json(purged)
        return

    action = "Would purge" if dry_run else "Purged"
    noun = "thread" if len(purged) == 1 else "threads"
    console.print(f"{action} {len(purged)} {noun}")
