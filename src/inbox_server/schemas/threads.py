from pydantic import BaseModel, ConfigDict, Field

from inbox_core.models import Sender, ThreadStatus


class DirRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dir: str | None = None


class CreateThreadRequest(DirRequest):
    title: str = Field(min_length=1)


class AddMessageRequest(DirRequest):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: str = Field(min_length=1)
    sender: Sender = Field(default="user", alias="from")
    status: ThreadStatus | None = None


class PurgeRequest(DirRequest):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    dry_run: bool = Field(default=False, alias="dryRun")


class PurgeResponse(BaseModel):
    count: int
    ids: list[str]
