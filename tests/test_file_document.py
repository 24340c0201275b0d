from __future__ import annotations

import anyio.to_thread
import pytest

from file_header.core.errors import DocumentEditError
from file_header.editor.base import DOCUMENT_START, Position, offset_at
from file_header.editor.file_document import FileDocument, FileEditorHost


@pytest.mark.anyio
async def test_insert_prepends_to_file(tmp_path) -> None:
    path = tmp_path / "main.c"
    path.write_text("int main(void) { return 0; }\n", encoding="utf-8")

    await FileDocument(path).insert(DOCUMENT_START, "/* header */\n\n")

    assert path.read_text(encoding="utf-8") == "/* header */\n\nint main(void) { return 0; }\n"
    assert [p.name for p in tmp_path.iterdir()] == ["main.c"]


@pytest.mark.anyio
async def test_insert_into_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    await FileDocument(path).insert(DOCUMENT_START, "Автор: ФИО\n")

    assert path.read_text(encoding="utf-8") == "Автор: ФИО\n"


@pytest.mark.anyio
async def test_insert_preserves_crlf_line_endings(tmp_path) -> None:
    path = tmp_path / "win.txt"
    path.write_bytes(b"a\r\nb\r\n")

    await FileDocument(path).insert(DOCUMENT_START, "h\n")

    assert path.read_bytes() == b"h\na\r\nb\r\n"


@pytest.mark.anyio
async def test_insert_into_missing_file_raises(tmp_path) -> None:
    with pytest.raises(DocumentEditError):
        await FileDocument(tmp_path / "gone.txt").insert(DOCUMENT_START, "x")


def test_host_without_path_has_no_active_document() -> None:
    assert FileEditorHost(None).active_document() is None


def test_host_with_missing_or_directory_path(tmp_path) -> None:
    assert FileEditorHost(tmp_path / "missing.py").active_document() is None
    assert FileEditorHost(tmp_path).active_document() is None


def test_host_returns_file_document(tmp_path) -> None:
    path = tmp_path / "doc.py"
    path.write_text("pass\n", encoding="utf-8")

    document = FileEditorHost(path).active_document()

    assert isinstance(document, FileDocument)
    assert document.uri == path.resolve().as_uri()


@pytest.mark.parametrize(
    "position, expected",
    [
        (Position(0, 0), 0),
        (Position(0, 2), 2),
        (Position(0, 99), 3),
        (Position(1, 1), 5),
        (Position(5, 0), 8),
    ],
)
def test_offset_at_clamps_to_text(position: Position, expected: int) -> None:
    assert offset_at("abc\ndef\n", position) == expected


@pytest.mark.parametrize(
    "text, position, expected",
    [
        ("a\x0cb\nc", Position(1, 0), 4),
        ("a b\nc", Position(0, 9), 3),
        ("a\x85b\x0bc", Position(1, 0), 5),
        ("ab\r\ncd", Position(0, 9), 2),
        ("ab\r\ncd", Position(1, 1), 5),
        ("ab\rcd", Position(1, 0), 3),
        ("\n\n", Position(1, 5), 1),
    ],
)
def test_offset_at_breaks_lines_like_an_editor(text: str, position: Position, expected: int) -> None:
    assert offset_at(text, position) == expected


@pytest.mark.anyio
async def test_unencodable_text_raises_edit_error_and_leaves_no_temp_file(tmp_path) -> None:
    path = tmp_path / "a.c"
    path.write_text("int x;\n", encoding="utf-8")

    with pytest.raises(DocumentEditError):
        await FileDocument(path).insert(DOCUMENT_START, "\udcff header\n")

    assert [p.name for p in tmp_path.iterdir()] == ["a.c"]
    assert path.read_text(encoding="utf-8") == "int x;\n"


@pytest.mark.anyio
async def test_insert_runs_file_io_off_the_event_loop(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "t.txt"
    path.write_text("body\n", encoding="utf-8")
    calls = []

    async def fake_run_sync(func, *args):
        calls.append(func.__name__)
        return func(*args)

    monkeypatch.setattr(anyio.to_thread, "run_sync", fake_run_sync)

    await FileDocument(path).insert(DOCUMENT_START, "head\n")

    assert calls == ["_insert_sync"]
    assert path.read_text(encoding="utf-8") == "head\nbody\n"
