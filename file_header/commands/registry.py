"""
A canonical command registry
"""

from file_header.core.errors import CommandNotFoundError
from file_header.schemas import CommandInfo, CommandName

COMMAND_REGISTRY = {
    CommandName.INSERT_HEADER.value: {
        "description": "Insert the configured author/group/date header at the top of the active document",
        "arguments": [],
    },
}


def resolve_command(name: str) -> CommandName:
    """Map a stable command name to its CommandName, or raise CommandNotFoundError."""
    if name not in COMMAND_REGISTRY:
        raise CommandNotFoundError(name)
    return CommandName(name)


def list_commands() -> list[CommandInfo]:
    return [
        CommandInfo(name=CommandName(name), description=entry["description"])
        for name, entry in COMMAND_REGISTRY.items()
    ]
