"""Insert-header command: active document -> render -> insert at 0:0 -> notify.

The command never queries global state directly: configuration arrives as a
resolved HeaderSettings, the date comes from an injected clock, and the
editor is reached only through the host ports.
"""

from __future__ import annotations

from file_header.config import HeaderSettings
from file_header.editor.base import DOCUMENT_START, EditorHost, Notifier
from file_header.observability.tracing import log_event, new_trace_id, timed_span
from file_header.runtime.clock import Clock, local_timestamp
from file_header.runtime.renderer import HeaderRenderer
from file_header.schemas import (
    CommandName,
    CommandResult,
    CommandStatus,
    Notification,
    NotificationLevel,
    RenderValues,
)

HEADER_INSERTED_MESSAGE = 'Заголовок вставлен.'
NO_ACTIVE_EDITOR_MESSAGE = 'Нет активного редактора.'


class InsertHeaderCommand:
    """Inserts the configured header at the top of the active document."""

    name = CommandName.INSERT_HEADER

    def __init__(
        self,
        *,
        renderer: HeaderRenderer | None = None,
        clock: Clock = local_timestamp,
    ) -> None:
        self._renderer = renderer or HeaderRenderer()
        self._clock = clock

    async def run(
        self,
        *,
        host: EditorHost,
        notifier: Notifier,
        settings: HeaderSettings,
        trace_id: str | None = None,
    ) -> CommandResult:
        """Run the command once.

        Returns:
            The command result. A missing active document is a normal
            outcome (status no_active_document), not an exception.

        Raises:
            DocumentEditError: If the host fails to apply the insertion. No
                success notification is emitted in that case.
        """
        trace_id = trace_id or new_trace_id()
        log_event('header.command.start', trace_id=trace_id, command=self.name.value)

        document = host.active_document()
        if document is None:
            warning = Notification(level=NotificationLevel.WARNING, message=NO_ACTIVE_EDITOR_MESSAGE)
            log_event('header.no_active_document', trace_id=trace_id)
            notifier.notify(warning)
            return CommandResult(
                command=self.name,
                status=CommandStatus.NO_ACTIVE_DOCUMENT,
                notifications=[warning],
            )

        values = RenderValues(author=settings.author, group=settings.group, date=self._clock())
        header = self._renderer.render(settings.template, values)

        with timed_span('header.insert', trace_id=trace_id, uri=document.uri) as span:
            await document.insert(DOCUMENT_START, header)
        log_event('header.inserted', trace_id=trace_id, span=span, chars=len(header))

        info = Notification(level=NotificationLevel.INFORMATION, message=HEADER_INSERTED_MESSAGE)
        notifier.notify(info)
        return CommandResult(
            command=self.name,
            status=CommandStatus.APPLIED,
            inserted_text=header,
            notifications=[info],
        )
