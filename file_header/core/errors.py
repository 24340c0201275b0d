# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class CommandNotFoundError(LookupError):
    """Raised when no command is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command '{name}'")


class DocumentEditError(RuntimeError):
    """Raised when the host fails to apply an edit to a document."""
    pass
