from pathlib import Path
from typing import Optional

import typer

from inbox_core.models import SENDERS, THREAD_STATUSES
from inbox_core.threads import add_message as add_thread_message

from ..utils import console, print_json, resolve_dir, run


def validate_sender(value: str) -> str:
    if value not in SENDERS:
        raise typer.BadParameter(f"must be one of: {', '.join(SENDERS)}")
    return value


def validate_status(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in THREAD_STATUSES:
        raise typer.BadParameter(f"must be one of: {', '.join(THREAD_STATUSES)}")
    return value


def add_message(
    thread_id: str = typer.Argument(..., help="Thread ID to add the message to"),
    message: str = typer.Argument(..., help="Message content"),
    sender: str = typer.Option("user", "--from", callback=validate_sender, help="Message sender (user or ai)"),
    status: Optional[str] = typer.Option(
        None,
        "--status",
        callback=validate_status,
        help=f"Set the thread status ({', '.join(THREAD_STATUSES)})",
    ),
    directory: Optional[Path] = typer.Option(None, "--dir", help="Directory holding the threads file"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a message to a thread."""
    thread = run(add_thread_message(resolve_dir(directory), thread_id, message, sender=sender, status=status))
    if as_json:
        print_json(thread)
    else:
        console.print(f"Added message to thread {thread.id}", markup=False)
