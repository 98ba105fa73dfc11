"""Common test fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from mirror_sync.sync import SyncService


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    path = tmp_path / "destination"
    path.mkdir()
    return path


@pytest.fixture
def write_file() -> Callable[..., Path]:
    """Create a file (and its parents) with the given content."""

    def _write(path: Path, content: str = "test content") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def sync_service() -> SyncService:
    return SyncService(workers=2)
