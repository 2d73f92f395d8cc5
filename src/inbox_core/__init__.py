"""Local file-backed thread inbox: data model, storage and thread engine."""

from inbox_core.errors import CorruptRecordError, ThreadInboxError, ThreadNotFoundError
from inbox_core.models import Message, Thread

__all__ = [
    "CorruptRecordError",
    "Message",
    "Thread",
    "ThreadInboxError",
    "ThreadNotFoundError",
]
