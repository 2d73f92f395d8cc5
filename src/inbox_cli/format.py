"""Rich renderables for threads in the terminal."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from inbox_core.models import Thread
from inbox_core.utils import parse_iso

STATUS_STYLES = {
    "needs-reply": "yellow",
    "review": "magenta",
    "waiting": "cyan",
    "resolved": "dim",
}

SENDER_STYLES = {
    "ai": "cyan",
    "user": "green",
}


def format_age(then: datetime, now: Optional[datetime] = None) -> str:
    """Compact age of `then` relative to `now`, using the largest whole unit."""
    now = now or datetime.now(timezone.utc)
    seconds = int((now - then).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30

    if months > 0:
        return f"{months}mo"
    if weeks > 0:
        return f"{weeks}w"
    if days > 0:
        return f"{days}d"
    if hours > 0:
        return f"{hours}h"
    if minutes > 0:
        return f"{minutes}m"
    return f"{seconds}s"


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def status_text(status: str) -> Text:
    return Text(status, style=STATUS_STYLES.get(status, ""))


def render_thread_list(threads: Sequence[Thread], now: Optional[datetime] = None) -> RenderableType:
    if not threads:
        return Text("No threads found.")

    table = Table(box=None, header_style="bold", pad_edge=False)
    table.add_column("ID", no_wrap=True)
    table.add_column("STATUS", no_wrap=True)
    table.add_column("TITLE")
    table.add_column("LAST MESSAGE")
    table.add_column("AGE", no_wrap=True)

    for thread in threads:
        last = thread.last_message
        if last:
            last_text = f'"{truncate(last.content, 15)}" ({last.sender}, {format_age(parse_iso(last.at), now)})'
        else:
            last_text = "-"
        table.add_row(
            thread.id,
            status_text(thread.status),
            Text(truncate(thread.title, 30)),
            Text(last_text),
            format_age(parse_iso(thread.created_at), now),
        )
    return table


def render_thread(thread: Thread) -> RenderableType:
    lines: list[RenderableType] = [
        Text(f"Thread: {thread.title}", style="bold"),
        Text(f"ID: {thread.id}"),
        Text.assemble("Status: ", status_text(thread.status)),
        Text(f"Created: {thread.created_at}"),
        Text(f"Updated: {thread.updated_at}"),
        Text(""),
    ]

    if not thread.messages:
        lines.append(Text("No messages yet."))
    else:
        lines.append(Text("Messages:", style="bold"))
        for message in thread.messages:
            lines.append(Text.assemble((f"[{message.sender}]", SENDER_STYLES[message.sender]), f" {message.at}"))
            lines.append(Text(f"  {message.content}"))
            lines.append(Text(""))

    return Group(*lines)
