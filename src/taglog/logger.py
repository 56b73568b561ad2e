"""The Logger: tagged, colored, optionally dated messages to console and file.

Calls are synchronous. Each one returns after the console and the file have
been written, and a failed file append raises in the calling thread.
"""

import os
from datetime import datetime
from typing import TYPE_CHECKING, Any, TextIO

from taglog.errors import InvalidConfiguration, SinkWriteFailure
from taglog.logging import logger
from taglog.models import Color, LogEntry, PreserveMode, Tag
from taglog.sinks import ConsoleSink, FileSink
from taglog.utils import (
    DEFAULT_TIMESTAMP_FORMAT,
    exception_body,
    exception_source,
    render_content,
)

if TYPE_CHECKING:
    from taglog.config import LoggerSettings


class Logger:
    """
    🏷️ Writes tagged messages to the console, a file, or both.

    Example:
        log = Logger("app.log", True, PreserveMode.MOVE_TO_ANOTHER_FILE)
        log.info("started", "pid", 1234)   # [INFO] started, pid, 1234
        log.warn(None)                     # [WARN] <null>
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None,
        console_enabled: bool,
        preserve_mode: PreserveMode | str | None = None,
        *,
        timestamp_format: str | None = None,
        stream: TextIO | None = None,
        colorize: bool | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """
        Validate the sinks and prepare the log file.

        Args:
            path: Log file path, or None for no file output
            console_enabled: Whether to print messages to standard output
            preserve_mode: What to do with an existing file's contents.
                None leaves the file as it is and appends to it.
            timestamp_format: strftime pattern for dated lines
            stream: Console stream (default: sys.stdout)
            colorize: Force console colors on or off (default: only on a TTY)
            encoding: Log file encoding

        Raises:
            InvalidConfiguration: No sink is enabled, the path is a
                directory, or the preserve mode is not recognized
        """
        if path is None and not console_enabled:
            raise InvalidConfiguration(
                "A logger that writes neither to a file nor to the console does nothing"
            )

        file_path = os.fspath(path) if path is not None else None
        if file_path == "":
            raise InvalidConfiguration("Log path must not be empty")
        if file_path is not None and os.path.isdir(file_path):
            raise InvalidConfiguration(f"Log path must be a file: {file_path}")

        mode = self._coerce_mode(preserve_mode)

        self._path = file_path
        self._console_enabled = bool(console_enabled)
        self._console = ConsoleSink(stream=stream, colorize=colorize)
        self._file = FileSink(file_path, encoding=encoding) if file_path is not None else None
        self.timestamp_format = timestamp_format or DEFAULT_TIMESTAMP_FORMAT
        self.output_dates_in_console = False
        self.output_dates_in_file = True

        if self._file is not None:
            self._file.prepare(mode)

        logger.debug(
            "Logger ready path={path} console={console} preserve_mode={mode}",
            path=file_path,
            console=self._console_enabled,
            mode=mode.value if mode else None,
        )

    @classmethod
    def from_settings(cls, settings: "LoggerSettings | None" = None) -> "Logger":
        """
        Build a Logger from ``LoggerSettings`` (read from TAGLOG_* env vars
        when no settings object is given).
        """
        from taglog.config import load_settings

        if settings is None:
            settings = load_settings()

        log = cls(
            settings.path,
            settings.console,
            settings.preserve_mode,
            timestamp_format=settings.timestamp_format,
            colorize=settings.colorize,
            encoding=settings.encoding,
        )
        log.output_dates_in_console = settings.dates_in_console
        log.output_dates_in_file = settings.dates_in_file
        return log

    @staticmethod
    def _coerce_mode(preserve_mode: PreserveMode | str | None) -> PreserveMode | None:
        if preserve_mode is None or isinstance(preserve_mode, PreserveMode):
            return preserve_mode
        try:
            return PreserveMode(preserve_mode)
        except ValueError as e:
            raise InvalidConfiguration(
                f"Unknown preserve mode: {preserve_mode!r}"
            ) from e

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def console_enabled(self) -> bool:
        return self._console_enabled

    def info(self, *content: Any) -> None:
        """Log with an "INFO" tag in white."""
        self._log(Tag.INFO.label, Tag.INFO.color, render_content(content))

    def warn(self, *content: Any) -> None:
        """Log with a "WARN" tag in yellow."""
        self._log(Tag.WARN.label, Tag.WARN.color, render_content(content))

    def error(self, *content: Any) -> None:
        """Log with an "ERROR" tag in red."""
        self._log(Tag.ERROR.label, Tag.ERROR.color, render_content(content))

    def debug(self, *content: Any) -> None:
        """Log with a "DEBUG" tag in green."""
        self._log(Tag.DEBUG.label, Tag.DEBUG.color, render_content(content))

    def exception(self, err: BaseException) -> None:
        """Log an exception's message and traceback in red."""
        self._log(
            f"Exception thrown in {exception_source(err)}",
            Color.RED,
            exception_body(err),
        )

    def _log(self, tag: str, color: Color, message: str) -> None:
        entry = LogEntry(
            tag=tag,
            color=color,
            message=message,
            timestamp=datetime.now(),
            timestamp_format=self.timestamp_format,
        )

        if self._console_enabled:
            self._console.write_line(
                entry.render(self.output_dates_in_console), entry.color
            )

        if self._file is None:
            return

        try:
            self._file.append_line(entry.render(self.output_dates_in_file))
        except OSError as e:
            self._console.write_line(f"taglog :: failed to write to file: {e}")
            logger.error(
                "Log file append failed path={path} error={error}",
                path=self._path,
                error=str(e),
            )
            raise SinkWriteFailure(self._path, str(e)) from e
