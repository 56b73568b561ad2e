"""Console and file destinations for log lines.

Every write to a sink happens under a lock: one lock for the console, and
one lock per resolved file path shared by every sink in the process.
"""

import os
import sys
import threading
from pathlib import Path
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console

from taglog.logging import logger
from taglog.models import Color, PreserveMode
from taglog.utils import previous_log_path

just_fix_windows_console()

_FOREGROUND = {
    Color.WHITE: Fore.WHITE,
    Color.YELLOW: Fore.YELLOW,
    Color.RED: Fore.RED,
    Color.GREEN: Fore.GREEN,
}

_CONSOLE_LOCK = threading.Lock()

_FILE_LOCKS: dict[str, threading.Lock] = {}
_FILE_LOCKS_GUARD = threading.Lock()


def _file_lock(path: str) -> threading.Lock:
    key = os.path.realpath(path)
    with _FILE_LOCKS_GUARD:
        return _FILE_LOCKS.setdefault(key, threading.Lock())


class ConsoleSink:
    """
    🖥️ Writes lines to a text stream, optionally in color.

    Set-color, text and reset are written as one locked unit so concurrent
    callers never bleed colors into each other's lines.
    """

    def __init__(self, stream: TextIO | None = None, colorize: bool | None = None):
        """
        Args:
            stream: Target stream. None means sys.stdout, looked up on every
                write so redirection is honored.
            colorize: Force colors on or off. None means "only on a TTY".
        """
        self._stream = stream
        self._colorize = colorize

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def supports_color(self) -> bool:
        if self._colorize is not None:
            return self._colorize
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def write_line(self, text: str, color: Color | None = None) -> None:
        stream = self.stream
        with _CONSOLE_LOCK:
            if color is not None and self.supports_color():
                stream.write(f"{_FOREGROUND[color]}{text}{Style.RESET_ALL}\n")
            else:
                stream.write(f"{text}\n")
            stream.flush()


class FileSink:
    """📄 Appends lines to a log file."""

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding
        self._lock = _file_lock(path)

    def prepare(self, mode: PreserveMode | None) -> None:
        """
        Make sure the file exists and apply the preserve mode to old contents.

        Args:
            mode: Policy for an existing file. None leaves it untouched.
        """
        target = Path(self.path)
        with self._lock:
            if not target.exists():
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
                logger.debug("Created log file path={path}", path=self.path)
                return

            if mode is None or mode is PreserveMode.APPEND:
                logger.debug("Appending to existing log file path={path}", path=self.path)
            elif mode is PreserveMode.OVERRIDE:
                target.write_bytes(b"")
                logger.debug("Truncated log file path={path}", path=self.path)
            elif mode is PreserveMode.MOVE_TO_ANOTHER_FILE:
                previous = previous_log_path(self.path)
                Path(previous).write_bytes(target.read_bytes())
                target.write_bytes(b"")
                logger.debug(
                    "Moved previous log contents path={path} previous={previous}",
                    path=self.path,
                    previous=previous,
                )

    def append_line(self, text: str) -> None:
        with self._lock:
            with open(self.path, "a", encoding=self.encoding) as handle:
                handle.write(f"{text}\n")
