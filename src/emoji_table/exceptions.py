"""Exceptions raised by the generator and the table loaders."""


class EmojiDataError(ValueError):
    """Emoji data failed to parse or violates a table invariant."""

    def __init__(self, message: str, *, source: str | None = None, line: int | None = None) -> None:
        location = ""
        if source is not None:
            location = f"{source}:{line}: " if line is not None else f"{source}: "
        super().__init__(f"{location}{message}")
        self.source = source
        self.line = line
