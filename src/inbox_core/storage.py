"""Newline-delimited JSON storage for the full set of threads in a directory."""

import logging
import secrets
from pathlib import Path
from typing import Sequence

import aiofiles
import aiofiles.os
from pydantic import ValidationError

from inbox_core.errors import CorruptRecordError
from inbox_core.models import Thread

logger = logging.getLogger(__name__)

FILENAME = ".threads.jsonl"


def threads_path(directory: str | Path) -> Path:
    return Path(directory) / FILENAME


async def load_all(directory: str | Path) -> list[Thread]:
    """Read every thread stored in `directory`; a missing file is an empty store."""
    path = threads_path(directory)
    try:
        async with aiofiles.open(path, "rb") as f:
            content = await f.read()
    except FileNotFoundError:
        return []

    threads = []
    for line_number, raw_line in enumerate(content.split(b"\n"), start=1):
        if not raw_line.strip():
            continue
        try:
            threads.append(Thread.model_validate_json(raw_line.decode("utf-8")))
        except (UnicodeDecodeError, ValidationError) as e:
            raise CorruptRecordError(path, line_number, str(e)) from e

    logger.debug(f"Loaded {len(threads)} threads from {path}")
    return threads


async def save_all(directory: str | Path, threads: Sequence[Thread]) -> None:
    """Replace the threads file in `directory` with `threads`.

    The records are written to a temporary sibling first and then renamed over
    the real file, so readers see either the old or the new content in full.
    """
    path = threads_path(directory)
    await aiofiles.os.makedirs(path.parent, exist_ok=True)

    content = "".join(f"{thread.to_json()}\n" for thread in threads)
    tmp_path = path.with_name(f"{path.name}.{secrets.token_hex(4)}.tmp")
    try:
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(content)
            await f.flush()
        await aiofiles.os.replace(tmp_path, path)
    except BaseException:
        if await aiofiles.os.path.exists(tmp_path):
            await aiofiles.os.remove(tmp_path)
        raise

    logger.debug(f"Wrote {len(threads)} threads to {path}")
