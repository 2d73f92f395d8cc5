"""JSON API for threads, used by the browser GUI."""

import logging
from pathlib import Path

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from inbox_core import threads as engine
from inbox_core.models import Thread, ThreadFilter
from inbox_server.dependencies import get_default_dir
from inbox_server.schemas.threads import (
    AddMessageRequest,
    CreateThreadRequest,
    DirRequest,
    PurgeRequest,
    PurgeResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/threads", tags=["threads"])


def _target_dir(requested: str | None, default_dir: Path) -> Path:
    return Path(requested) if requested else default_dir


@router.get("", response_model=list[Thread])
async def index(
    directory: str | None = Query(None, alias="dir"),
    status: ThreadFilter | None = Query(None),
    default_dir: Path = Depends(get_default_dir),
) -> list[Thread]:
    """List threads, optionally filtered by status or inbox."""
    return await engine.list_threads(_target_dir(directory, default_dir), status)


@router.post("", response_model=Thread, status_code=201)
async def create(
    body: CreateThreadRequest = Body(...),
    default_dir: Path = Depends(get_default_dir),
) -> Thread:
    """Create a new thread."""
    return await engine.create_thread(_target_dir(body.dir, default_dir), body.title)


@router.post("/purge", response_model=PurgeResponse)
async def purge(
    body: PurgeRequest | None = Body(None),
    default_dir: Path = Depends(get_default_dir),
) -> PurgeResponse:
    """Remove every resolved thread."""
    body = body or PurgeRequest()
    purged = await engine.purge_threads(_target_dir(body.dir, default_dir), dry_run=body.dry_run)
    return PurgeResponse(count=len(purged), ids=[t.id for t in purged])


@router.get("/{thread_id}", response_model=Thread)
async def get(
    thread_id: str,
    directory: str | None = Query(None, alias="dir"),
    default_dir: Path = Depends(get_default_dir),
) -> Thread:
    """Retrieve a thread by ID."""
    thread = await engine.get_thread(_target_dir(directory, default_dir), thread_id)
    if not thread:
        raise HTTPException(status_code=404, detail=f"Thread {thread_id} not found")
    return thread


@router.post("/{thread_id}/messages", response_model=Thread)
async def add_message(
    thread_id: str,
    body: AddMessageRequest = Body(...),
    default_dir: Path = Depends(get_default_dir),
) -> Thread:
    """Append a message to a thread."""
    return await engine.add_message(
        _target_dir(body.dir, default_dir),
        thread_id,
        body.content,
        sender=body.sender,
        status=body.status,
    )


@router.put("/{thread_id}/resolve", response_model=Thread)
async def resolve(
    thread_id: str,
    body: DirRequest | None = Body(None),
    default_dir: Path = Depends(get_default_dir),
) -> Thread:
    return await engine.resolve_thread(_target_dir(body.dir if body else None, default_dir), thread_id)


@router.put("/{thread_id}/reopen", response_model=Thread)
async def reopen(
    thread_id: str,
    body: DirRequest | None = Body(None),
    default_dir: Path = Depends(get_default_dir),
) -> Thread:
    return await engine.reopen_thread(_target_dir(body.dir if body else None, default_dir), thread_id)
