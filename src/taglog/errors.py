"""Exceptions raised by taglog."""


class TaglogError(Exception):
    """Base class for every error raised by taglog."""


class InvalidConfiguration(TaglogError, ValueError):
    """The logger cannot be built from the given arguments or settings."""


class SinkWriteFailure(TaglogError, OSError):
    """Appending a line to the log file failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to write to {path}: {reason}")
        self.path = path
        self.reason = reason
