"""Tagged, colored, optionally dated logging to the console and a file."""

from taglog.errors import InvalidConfiguration, SinkWriteFailure, TaglogError
from taglog.logger import Logger
from taglog.logging import enable_diagnostics
from taglog.models import LogEntry, PreserveMode, PreviousLogPreserveMode, Tag

__all__ = [
    "InvalidConfiguration",
    "LogEntry",
    "Logger",
    "PreserveMode",
    "PreviousLogPreserveMode",
    "SinkWriteFailure",
    "Tag",
    "TaglogError",
    "enable_diagnostics",
]
