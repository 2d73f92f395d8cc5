from pathlib import Path


class ThreadInboxError(Exception):
    """Base class for thread inbox failures."""


class ThreadNotFoundError(ThreadInboxError, LookupError):
    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Thread {thread_id} not found")


class CorruptRecordError(ThreadInboxError):
    """A non-blank line of the threads file is not a valid thread record."""

    def __init__(self, path: Path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(f"Corrupt record in {path} at line {line_number}: {reason}")
