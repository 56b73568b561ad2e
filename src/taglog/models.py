"""Data models for taglog."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PreserveMode(str, Enum):
    """
    🗂️ How a log file's existing contents are handled when a Logger opens it.

    The policy is applied once, at construction, and only when the file
    already exists.
    """

    OVERRIDE = "override"
    """Truncate the file and start anew."""

    MOVE_TO_ANOTHER_FILE = "move_to_another_file"
    """Copy the old contents to ``<path>-PREVIOUS``, then truncate."""

    APPEND = "append"
    """Keep the old contents and write after them."""

    @classmethod
    def _missing_(cls, value: object) -> "PreserveMode | None":
        # Accept member names in any spelling: "Append", "MoveToAnotherFile", "OVERRIDE"
        if isinstance(value, str):
            wanted = value.replace("_", "").replace("-", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == wanted:
                    return member
        return None


PreviousLogPreserveMode = PreserveMode


class Color(str, Enum):
    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"
    GREEN = "green"


class Tag(Enum):
    """Severity label paired with the console color it is printed in."""

    INFO = ("INFO", Color.WHITE)
    WARN = ("WARN", Color.YELLOW)
    ERROR = ("ERROR", Color.RED)
    DEBUG = ("DEBUG", Color.GREEN)

    def __init__(self, label: str, color: Color) -> None:
        self.label = label
        self.color = color


class LogEntry(BaseModel):
    """
    📝 A single formatted log message, ready to be written to a sink.

    The entry carries both renderings of the message so each sink can pick
    the dated or undated one according to its own setting.
    """

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., description="Label shown in brackets (e.g. 'INFO')")
    color: Color = Field(..., description="Console color intent for the line")
    message: str = Field(..., description="Rendered message body")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Local time the entry was made"
    )
    timestamp_format: str = Field(
        "%Y-%m-%d %H:%M:%S", description="strftime pattern for the dated line"
    )

    @property
    def line(self) -> str:
        return f"[{self.tag}] {self.message}"

    @property
    def dated_line(self) -> str:
        return f"{self.timestamp.strftime(self.timestamp_format)} {self.line}"

    def render(self, dated: bool) -> str:
        return self.dated_line if dated else self.line
