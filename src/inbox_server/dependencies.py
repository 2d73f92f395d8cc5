from pathlib import Path
from typing import Protocol, cast

from fastapi import Request


class HasDefaultDir(Protocol):
    default_dir: Path


def get_default_dir(request: Request) -> Path:
    state = cast(HasDefaultDir, request.app.state)
    return state.default_dir
