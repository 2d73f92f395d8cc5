"""Thread operations.

Every operation loads the whole store, changes it in memory and writes it back.
Nothing is cached between calls, so two writers racing on the same directory
may lose an update (the last write wins).
"""

import logging
from pathlib import Path
from typing import Optional

from inbox_core.errors import ThreadNotFoundError
from inbox_core.models import THREAD_FILTERS, THREAD_STATUSES, Message, Sender, Thread, ThreadStatus, matches_filter
from inbox_core.storage import load_all, save_all
from inbox_core.utils import generate_id, now_iso

logger = logging.getLogger(__name__)


def _find(threads: list[Thread], thread_id: str) -> Thread:
    for thread in threads:
        if thread.id == thread_id:
            return thread
    raise ThreadNotFoundError(thread_id)


async def create_thread(directory: str | Path, title: str) -> Thread:
    """Create a new active thread with no messages."""
    threads = await load_all(directory)
    now = now_iso()
    thread = Thread(
        id=generate_id({t.id for t in threads}),
        title=title,
        status="active",
        messages=[],
        created_at=now,
        updated_at=now,
    )
    threads.append(thread)
    await save_all(directory, threads)
    logger.info(f"Created thread {thread.id} in {directory}")
    return thread


async def list_threads(directory: str | Path, status_filter: Optional[str] = None) -> list[Thread]:
    """List threads in file order, optionally keeping only those matching a filter."""
    if status_filter and status_filter not in THREAD_FILTERS:
        raise ValueError(f"Unknown filter '{status_filter}'. Must be one of: {', '.join(THREAD_FILTERS)}")
    threads = await load_all(directory)
    if not status_filter:
        return threads
    return [t for t in threads if matches_filter(t, status_filter)]


async def get_thread(directory: str | Path, thread_id: str) -> Optional[Thread]:
    """Get a thread by ID, or None."""
    for thread in await load_all(directory):
        if thread.id == thread_id:
            return thread
    return None


async def add_message(
    directory: str | Path,
    thread_id: str,
    content: str,
    sender: Sender = "user",
    status: Optional[ThreadStatus] = None,
) -> Thread:
    """Append a message and apply the status rule.

    An explicit status always wins. Otherwise a user message moves the thread
    to waiting and an ai message leaves the status as it was.
    """
    if status is not None and status not in THREAD_STATUSES:
        raise ValueError(f"Unknown status '{status}'. Must be one of: {', '.join(THREAD_STATUSES)}")

    threads = await load_all(directory)
    thread = _find(threads, thread_id)

    now = now_iso()
    thread.messages.append(Message(sender=sender, content=content, at=now))
    thread.touch(now)
    if status is not None:
        thread.status = status
    elif sender == "user":
        thread.status = "waiting"

    await save_all(directory, threads)
    return thread


async def _set_status(directory: str | Path, thread_id: str, status: ThreadStatus) -> Thread:
    threads = await load_all(directory)
    thread = _find(threads, thread_id)
    thread.status = status
    thread.touch(now_iso())
    await save_all(directory, threads)
    logger.info(f"Thread {thread_id} is now {status}")
    return thread


async def resolve_thread(directory: str | Path, thread_id: str) -> Thread:
    return await _set_status(directory, thread_id, "resolved")


async def reopen_thread(directory: str | Path, thread_id: str) -> Thread:
    return await _set_status(directory, thread_id, "active")


async def purge_threads(directory: str | Path, dry_run: bool = False) -> list[Thread]:
    """Delete resolved threads for good and return them.

    With dry_run, or when nothing is resolved, the file is left untouched.
    """
    threads = await load_all(directory)
    resolved = [t for t in threads if t.status == "resolved"]

    if not dry_run and resolved:
        await save_all(directory, [t for t in threads if t.status != "resolved"])
        logger.info(f"Purged {len(resolved)} resolved threads from {directory}")

    return resolved
