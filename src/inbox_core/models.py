"""Thread and message models as stored in the threads file."""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from inbox_core.utils import now_iso

Sender = Literal["ai", "user"]
ThreadStatus = Literal["active", "waiting", "needs-reply", "review", "resolved"]
ThreadFilter = Literal["active", "waiting", "needs-reply", "review", "resolved", "inbox"]

SENDERS: tuple[str, ...] = get_args(Sender)
THREAD_STATUSES: tuple[str, ...] = get_args(ThreadStatus)
THREAD_FILTERS: tuple[str, ...] = get_args(ThreadFilter)
INBOX_STATUSES = frozenset({"needs-reply", "review"})


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: Sender
    content: str
    at: str = Field(default_factory=now_iso)


class Thread(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str
    title: str
    status: ThreadStatus = "active"
    messages: list[Message] = Field(default_factory=list)
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    @property
    def last_message(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def touch(self, at: str) -> None:
        """Record a mutation at `at` without letting updatedAt move backwards."""
        self.updated_at = max(at, self.updated_at)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def matches_filter(thread: Thread, status_filter: str) -> bool:
    """Compare the stored status against a list filter."""
    if status_filter == "inbox":
        return thread.status in INBOX_STATUSES
    return thread.status == status_filter
