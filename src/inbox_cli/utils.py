import asyncio
import json
from pathlib import Path
from typing import Any, Coroutine, Optional, Sequence, TypeVar

import typer
from rich.console import Console

from inbox_core.config.settings import settings
from inbox_core.errors import ThreadInboxError
from inbox_core.models import Thread

T = TypeVar("T")

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def resolve_dir(directory: Optional[Path]) -> Path:
    return settings.resolve_dir(directory)


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run an engine call, turning failures into an error message and exit code 1."""
    try:
        return asyncio.run(coro)
    except (ThreadInboxError, OSError, ValueError) as e:
        err_console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(code=1)


def print_json(data: Thread | Sequence[Thread]) -> None:
    if isinstance(data, Thread):
        payload: Any = data.to_dict()
    else:
        payload = [thread.to_dict() for thread in data]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
