import json
from pathlib import Path

import aiofiles.os
import pytest

from inbox_core.errors import CorruptRecordError
from inbox_core.models import Message, Thread
from inbox_core.storage import FILENAME, load_all, save_all, threads_path


def make_thread(thread_id: str, title: str, status: str = "active", messages: list[Message] | None = None) -> Thread:
    return Thread(
        id=thread_id,
        title=title,
        status=status,
        messages=messages or [],
        created_at="2026-02-23T00:00:00.000Z",
        updated_at="2026-02-23T00:05:00.000Z",
    )


@pytest.mark.asyncio
async def test_load_all_returns_empty_list_when_file_missing(tmp_path: Path) -> None:
    assert await load_all(tmp_path) == []


@pytest.mark.asyncio
async def test_load_all_returns_empty_list_when_directory_missing(tmp_path: Path) -> None:
    assert await load_all(tmp_path / "does" / "not" / "exist") == []


@pytest.mark.asyncio
async def test_save_all_then_load_all_preserves_threads_and_order(tmp_path: Path) -> None:
    threads = [
        make_thread(
            "abc12345",
            "Topics bulk assignment",
            messages=[
                Message(sender="ai", content="Proposed 7 categories", at="2026-02-23T00:00:00.000Z"),
                Message(sender="user", content="ok", at="2026-02-23T00:05:00.000Z"),
            ],
        ),
        make_thread("def67890", "Auto-purge design", status="needs-reply"),
        make_thread("ghj23456", "Release notes", status="resolved"),
    ]

    await save_all(tmp_path, threads)

    assert await load_all(tmp_path) == threads


@pytest.mark.asyncio
async def test_save_all_writes_one_camel_case_record_per_line(tmp_path: Path) -> None:
    await save_all(tmp_path, [make_thread("abc12345", "One"), make_thread("def67890", "Two")])

    content = (tmp_path / FILENAME).read_text(encoding="utf-8")
    assert content.endswith("\n")
    lines = content.strip().split("\n")
    assert len(lines) == 2

    record = json.loads(lines[0])
    assert list(record.keys()) == ["id", "title", "status", "messages", "createdAt", "updatedAt"]
    assert record["id"] == "abc12345"
    assert json.loads(lines[1])["title"] == "Two"


@pytest.mark.asyncio
async def test_save_all_empty_sequence_writes_empty_file(tmp_path: Path) -> None:
    await save_all(tmp_path, [])
    assert (tmp_path / FILENAME).read_text(encoding="utf-8") == ""
    assert await load_all(tmp_path) == []


@pytest.mark.asyncio
async def test_load_all_skips_blank_lines(tmp_path: Path) -> None:
    first = make_thread("abc12345", "One").to_json()
    second = make_thread("def67890", "Two").to_json()
    (tmp_path / FILENAME).write_text(f"\n{first}\n\n   \n{second}\n\n", encoding="utf-8")

    threads = await load_all(tmp_path)

    assert [t.id for t in threads] == ["abc12345", "def67890"]


@pytest.mark.asyncio
async def test_load_all_raises_on_malformed_line(tmp_path: Path) -> None:
    good = make_thread("abc12345", "One").to_json()
    (tmp_path / FILENAME).write_text(f"{good}\n{{not json\n", encoding="utf-8")

    with pytest.raises(CorruptRecordError) as exc_info:
        await load_all(tmp_path)

    assert exc_info.value.line_number == 2
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_load_all_raises_on_record_with_unknown_status(tmp_path: Path) -> None:
    record = make_thread("abc12345", "One").to_dict()
    record["status"] = "archived"
    (tmp_path / FILENAME).write_text(json.dumps(record) + "\n", encoding="utf-8")

    with pytest.raises(CorruptRecordError):
        await load_all(tmp_path)


@pytest.mark.asyncio
async def test_load_all_raises_on_record_missing_fields(tmp_path: Path) -> None:
    (tmp_path / FILENAME).write_text('{"id": "abc12345"}\n', encoding="utf-8")

    with pytest.raises(CorruptRecordError):
        await load_all(tmp_path)


@pytest.mark.asyncio
async def test_save_all_creates_missing_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir"

    await save_all(target, [make_thread("abc12345", "One")])

    assert (target / FILENAME).exists()


@pytest.mark.asyncio
async def test_save_all_overwrites_and_leaves_no_temp_files(tmp_path: Path) -> None:
    await save_all(tmp_path, [make_thread("abc12345", "One"), make_thread("def67890", "Two")])
    await save_all(tmp_path, [make_thread("ghj23456", "Three")])

    threads = await load_all(tmp_path)
    assert [t.id for t in threads] == ["ghj23456"]
    assert sorted(p.name for p in tmp_path.iterdir()) == [FILENAME]


@pytest.mark.asyncio
async def test_failed_replace_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    await save_all(tmp_path, [make_thread("abc12345", "One")])
    before = threads_path(tmp_path).read_text(encoding="utf-8")

    async def failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(aiofiles.os, "replace", failing_replace)

    with pytest.raises(OSError, match="disk full"):
        await save_all(tmp_path, [make_thread("def67890", "Two")])

    assert threads_path(tmp_path).read_text(encoding="utf-8") == before
    assert sorted(p.name for p in tmp_path.iterdir()) == [FILENAME]


@pytest.mark.asyncio
async def test_load_all_raises_on_invalid_utf8(tmp_path: Path) -> None:
    good = make_thread("abc12345", "One").to_json().encode("utf-8")
    (tmp_path / FILENAME).write_bytes(good + b"\n\xff\xfe{\n")

    with pytest.raises(CorruptRecordError) as exc_info:
        await load_all(tmp_path)

    assert exc_info.value.line_number == 2
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_load_all_reads_non_ascii_content(tmp_path: Path) -> None:
    message = Message(sender="user", content="héllo", at="2026-02-23T00:00:00.000Z")
    thread = make_thread("abc12345", "Résumé ✓", messages=[message])

    await save_all(tmp_path, [thread])

    assert await load_all(tmp_path) == [thread]
