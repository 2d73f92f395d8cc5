from fastapi import APIRouter

from inbox_server.routers.pages import router as pages_router
from inbox_server.routers.threads import router as threads_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(threads_router)
