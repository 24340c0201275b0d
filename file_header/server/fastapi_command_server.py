"""FastAPI editor command service.

An editor integration calls this service when the user triggers a command:
- the integration sends the path of the focused document (or null)
- the service runs the command against the file on disk
- the response carries the notifications the editor should show

Configuration is read fresh for every request, so changing the
FILE_HEADER_* environment (or .env) takes effect without a restart.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException

from file_header.commands.registry import list_commands, resolve_command
from file_header.config import HeaderSettings, load_settings
from file_header.core.errors import CommandNotFoundError, DocumentEditError
from file_header.editor.file_document import FileEditorHost, LoggingNotifier
from file_header.observability.tracing import log_event, new_trace_id
from file_header.runtime.clock import use_system_locale
from file_header.schemas import CommandInfo, CommandResult, InvokeCommandIn
from file_header.server.core.container import Container, get_container

# ${date} follows the locale of the user running the service
use_system_locale()

app = FastAPI(title='File Header Command Service', version='1.0.0')


@app.get('/commands', response_model=list[CommandInfo])
async def get_commands() -> list[CommandInfo]:
    return list_commands()


@app.post('/commands/{command_name}', response_model=CommandResult)
async def invoke_command(
    command_name: str,
    payload: InvokeCommandIn,
    container: Container = Depends(get_container),
    settings: HeaderSettings = Depends(load_settings),
) -> CommandResult:
    try:
        name = resolve_command(command_name)
    except CommandNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    trace_id = new_trace_id()
    try:
        return await container.command(name).run(
            host=FileEditorHost(payload.document_path),
            notifier=LoggingNotifier(trace_id),
            settings=settings,
            trace_id=trace_id,
        )
    except DocumentEditError as exc:
        log_event('header.edit_failed', trace_id=trace_id, error=str(exc))
        raise HTTPException(status_code=500, detail=str(exc)) from exc
