"""File-backed editor host.

The "active editor" is a file on disk. Edits are written to a temporary file
next to the original and moved into place, so a reader either sees the old
content or the fully edited one.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import anyio.to_thread

from file_header.core.errors import DocumentEditError
from file_header.editor.base import EditorHost, Notifier, Position, TextDocument, offset_at
from file_header.observability.tracing import log_event
from file_header.schemas import Notification


class FileDocument(TextDocument):
    """A UTF-8 text file treated as an open document."""

    def __init__(self, path: str | Path, encoding: str = 'utf-8') -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def uri(self) -> str:
        return self._path.resolve().as_uri()

    @property
    def path(self) -> Path:
        return self._path

    async def insert(self, position: Position, text: str) -> None:
        # File I/O runs on a worker thread to keep the event loop free
        await anyio.to_thread.run_sync(self._insert_sync, position, text)

    def _insert_sync(self, position: Position, text: str) -> None:
        try:
            # newline='' keeps the file's own line endings untouched
            with self._path.open('r', encoding=self._encoding, newline='') as fh:
                current = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentEditError(f'Cannot read {self._path}: {exc}') from exc

        offset = offset_at(current, position)
        updated = current[:offset] + text + current[offset:]
        self._write_atomic(updated)

    def _write_atomic(self, content: str) -> None:
        directory = self._path.resolve().parent
        try:
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f'.{self._path.name}.', suffix='.tmp')
        except OSError as exc:
            raise DocumentEditError(f'Cannot write {self._path}: {exc}') from exc

        replaced = False
        try:
            with os.fdopen(fd, 'w', encoding=self._encoding, newline='') as fh:
                fh.write(content)
            mode = self._path.stat().st_mode
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self._path)
            replaced = True
        except (OSError, UnicodeError) as exc:
            raise DocumentEditError(f'Cannot write {self._path}: {exc}') from exc
        finally:
            if not replaced and os.path.exists(tmp_name):
                os.unlink(tmp_name)


class FileEditorHost(EditorHost):
    """Host whose focused editor is the file at active_path, if it exists."""

    def __init__(self, active_path: str | Path | None) -> None:
        self._active_path = Path(active_path) if active_path else None

    def active_document(self) -> FileDocument | None:
        if self._active_path is None or not self._active_path.is_file():
            return None
        return FileDocument(self._active_path)


class LoggingNotifier(Notifier):
    """Reports notifications as structured log events."""

    def __init__(self, trace_id: str) -> None:
        self._trace_id = trace_id

    def notify(self, notification: Notification) -> None:
        log_event(
            'notification',
            trace_id=self._trace_id,
            level=notification.level.value,
            message=notification.message,
        )
