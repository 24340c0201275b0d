"""Editor host abstraction.

A host might be:
- a desktop editor driving us through an extension bridge
- the local file system (a file path stands in for the focused editor)
- an in-memory buffer in tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from file_header.schemas import Notification


@dataclass(frozen=True)
class Position:
    """Zero-based line/character position inside a document."""

    line: int
    character: int


DOCUMENT_START = Position(line=0, character=0)


class TextDocument(ABC):
    """An editable document owned by the host."""

    @property
    @abstractmethod
    def uri(self) -> str:
        raise NotImplementedError

    @abstractmethod
    async def insert(self, position: Position, text: str) -> None:
        """Insert text at position as one atomic edit.

        Returns only after the edit is applied.

        Raises:
            DocumentEditError: If the host could not apply the edit.
        """
        raise NotImplementedError


class EditorHost(ABC):
    """Discovers the document currently focused for editing."""

    @abstractmethod
    def active_document(self) -> TextDocument | None:
        raise NotImplementedError


class Notifier(ABC):
    """Shows messages to the user."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError


def offset_at(text: str, position: Position) -> int:
    """Translate a position to a character offset, clamped to the text.

    Lines end at \\n, \\r\\n or \\r only, as in editors. Lines past the end
    clamp to the end of the text, characters past the end of a line clamp to
    the end of that line.
    """
    line_start = 0
    for _ in range(max(position.line, 0)):
        line_start = _next_line_start(text, line_start)
        if line_start is None:
            return len(text)

    line_end = _next_line_start(text, line_start)
    if line_end is None:
        line_end = len(text)
    else:
        line_end -= 2 if text[line_end - 2:line_end] == '\r\n' else 1
    return line_start + min(max(position.character, 0), line_end - line_start)


def _next_line_start(text: str, start: int) -> int | None:
    for index in range(start, len(text)):
        char = text[index]
        if char == '\n':
            return index + 1
        if char == '\r':
            return index + 2 if text[index + 1:index + 2] == '\n' else index + 1
    return None
