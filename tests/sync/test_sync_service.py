"""Test mirroring a source tree into a destination tree."""

from pathlib import Path

import pytest

from mirror_sync.exceptions import FileOperationError
from mirror_sync.sync import SyncService, scan_directory, sync_folder


@pytest.mark.asyncio
async def test_sync_into_empty_destination(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    write_file(source_dir / "file1.txt", "hello")
    write_file(source_dir / "file2.txt", "world")

    report = await sync_service.sync(source_dir, dest_dir)

    assert report.success
    assert report.copied == 2
    assert report.deleted == 0
    assert (dest_dir / "file1.txt").read_text() == "hello"
    assert (dest_dir / "file2.txt").stat().st_size == 5


@pytest.mark.asyncio
async def test_sync_creates_destination(
    sync_service: SyncService, source_dir: Path, tmp_path: Path, write_file
):
    write_file(source_dir / "nested" / "file.txt", "content")
    destination = tmp_path / "new" / "destination"

    report = await sync_service.sync(source_dir, destination)

    assert report.success
    assert (destination / "nested" / "file.txt").read_text() == "content"


@pytest.mark.asyncio
async def test_sync_empty_source_removes_everything(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    """Stale files are deleted and the emptied destination is pruned away."""
    write_file(dest_dir / "stale.txt", "old")

    report = await sync_service.sync(source_dir, dest_dir)

    assert report.success
    assert report.to_copy == {}
    assert report.to_delete == {str(dest_dir / "stale.txt"): ""}
    assert report.deleted == 1
    assert not dest_dir.exists()


@pytest.mark.asyncio
async def test_sync_overwrites_size_mismatch(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    write_file(source_dir / "file.txt", "abcd")
    write_file(dest_dir / "file.txt", "1234567")

    report = await sync_service.sync(source_dir, dest_dir)

    assert report.success
    assert report.to_copy == {str(source_dir / "file.txt"): str(dest_dir / "file.txt")}
    assert report.to_delete == {}
    assert (dest_dir / "file.txt").read_text() == "abcd"


@pytest.mark.asyncio
async def test_same_size_content_change_is_not_detected(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    write_file(source_dir / "file.txt", "aaaa")
    write_file(dest_dir / "file.txt", "bbbb")

    report = await sync_service.sync(source_dir, dest_dir)

    assert report.total == 0
    assert (dest_dir / "file.txt").read_text() == "bbbb"


@pytest.mark.asyncio
async def test_sync_is_idempotent(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    write_file(source_dir / "a.txt", "a")
    write_file(source_dir / "sub" / "b.txt", "bb")
    write_file(dest_dir / "old" / "c.txt", "ccc")

    first = await sync_service.sync(source_dir, dest_dir)
    second = await sync_service.sync(source_dir, dest_dir)

    assert first.success
    assert first.total == 3
    assert second.success
    assert second.to_copy == {}
    assert second.to_delete == {}
    assert not (dest_dir / "old").exists()


@pytest.mark.asyncio
async def test_copied_file_rescans_with_same_size(
    sync_service: SyncService, source_dir: Path, dest_dir: Path
):
    (source_dir / "blob.bin").write_bytes(b"x" * 300_000)

    await sync_service.sync(source_dir, dest_dir)

    snapshot = scan_directory(dest_dir)
    assert snapshot[str(dest_dir / "blob.bin")].size == 300_000


@pytest.mark.asyncio
async def test_sync_with_single_worker(source_dir: Path, dest_dir: Path, write_file):
    for i in range(10):
        write_file(source_dir / f"file{i}.txt", "x" * i)
        write_file(dest_dir / f"stale{i}.txt")

    report = await SyncService(workers=1).sync(source_dir, dest_dir)

    assert report.success
    assert report.copied == 10
    assert report.deleted == 10
    assert sorted(p.name for p in dest_dir.iterdir()) == sorted(f"file{i}.txt" for i in range(10))


@pytest.mark.asyncio
async def test_missing_source_fails_closed(
    sync_service: SyncService, tmp_path: Path, dest_dir: Path, write_file
):
    """An unscannable source must not be treated as empty."""
    write_file(dest_dir / "precious.txt")

    report = await sync_service.sync(tmp_path / "nonexistent", dest_dir)

    assert not report.success
    assert report.scan_error is not None
    assert report.total == 0
    assert (dest_dir / "precious.txt").exists()


@pytest.mark.asyncio
async def test_task_failure_is_reported(
    sync_service: SyncService, source_dir: Path, dest_dir: Path, write_file
):
    """A destination directory in the way of a source file makes the copy fail."""
    write_file(source_dir / "clash", "file")
    write_file(source_dir / "fine.txt", "ok")
    write_file(dest_dir / "clash" / "inner.txt", "dir")

    report = await sync_service.sync(source_dir, dest_dir)

    assert not report.success
    assert report.copied == 1
    assert report.deleted == 1
    assert len(report.failures) == 1
    assert report.failures[0].task.source == str(source_dir / "clash")
    assert isinstance(report.failures[0].error, FileOperationError)
    assert (dest_dir / "fine.txt").read_text() == "ok"


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        SyncService(workers=0)


def test_sync_folder(source_dir: Path, dest_dir: Path, write_file):
    write_file(source_dir / "file1.txt", "hello")
    write_file(source_dir / "file2.txt", "hello")

    assert sync_folder(source_dir, dest_dir, workers=2) is True
    assert sorted(p.name for p in dest_dir.iterdir()) == ["file1.txt", "file2.txt"]


def test_sync_folder_reports_failure(tmp_path: Path, dest_dir: Path):
    assert sync_folder(tmp_path / "nonexistent", dest_dir) is False
