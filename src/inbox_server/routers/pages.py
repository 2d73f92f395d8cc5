from pathlib import Path

from fastapi import APIRouter, Depends
from htpy.starlette import HtpyResponse

from inbox_server.dependencies import get_default_dir
from inbox_server.views.pages.inbox import render_inbox

router = APIRouter(tags=["pages"])


@router.get("/")
async def index(default_dir: Path = Depends(get_default_dir)) -> HtpyResponse:
    return HtpyResponse(render_inbox(directory=str(default_dir)))
