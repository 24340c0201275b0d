"""Schemas for command invocation, rendering values, and results.

Pydantic keeps the HTTP surface and the command result schema-stable:
- RenderValues is the per-invocation token mapping.
- CommandResult is what the command reports back to its host.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CommandName(str, Enum):
    """Supported editor commands."""

    INSERT_HEADER = 'fileHeader.insert'


class RenderValues(BaseModel):
    """Resolved values for the header tokens. Any of them may be empty."""

    author: str = ''
    group: str = ''
    date: str = ''

    def as_tokens(self) -> dict[str, str]:
        return {'author': self.author, 'group': self.group, 'date': self.date}


class NotificationLevel(str, Enum):
    INFORMATION = 'information'
    WARNING = 'warning'


class Notification(BaseModel):
    """A user-visible message emitted by a command."""

    level: NotificationLevel
    message: str


class CommandStatus(str, Enum):
    APPLIED = 'applied'
    NO_ACTIVE_DOCUMENT = 'no_active_document'


class CommandResult(BaseModel):
    """Outcome of one command invocation.

    Examples:
        >>> CommandResult(command=CommandName.INSERT_HEADER, status=CommandStatus.NO_ACTIVE_DOCUMENT).inserted_text is None
        True
    """

    command: CommandName
    status: CommandStatus
    inserted_text: str | None = None
    notifications: list[Notification] = Field(default_factory=list)


class InvokeCommandIn(BaseModel):
    """Body of an HTTP command invocation."""

    document_path: str | None = Field(
        default=None,
        description='Path of the document focused in the editor, if any.',
    )


class CommandInfo(BaseModel):
    name: CommandName
    description: str
