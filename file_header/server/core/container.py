# --------------------------------
# DI container
# --------------------------------

from functools import lru_cache

from file_header.commands.insert_header import InsertHeaderCommand
from file_header.runtime.clock import local_timestamp
from file_header.runtime.renderer import HeaderRenderer
from file_header.schemas import CommandName


class Container:
    def __init__(self):
        self._renderer = HeaderRenderer()
        self._commands = {
            CommandName.INSERT_HEADER: InsertHeaderCommand(
                renderer=self._renderer,
                clock=local_timestamp,
            ),
        }

    @property
    def renderer(self):
        return self._renderer

    def command(self, name: CommandName) -> InsertHeaderCommand:
        return self._commands[name]


@lru_cache
def get_container():
    return Container()
