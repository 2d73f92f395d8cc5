from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from inbox_core.config.settings import Settings


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / "store"


@pytest.fixture
def client(store_dir: Path) -> Generator[TestClient, None, None]:
    from inbox_server.app import create_app

    app = create_app(store_dir, Settings(open_browser=False))

    with TestClient(app) as test_client:
        yield test_client
