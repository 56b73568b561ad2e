import traceback
from typing import Any

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
NULL_TEXT = "<null>"
PREVIOUS_SUFFIX = "-PREVIOUS"


def render_content(content: tuple[Any, ...]) -> str:
    """
    Turn the positional arguments of a log call into one message string.

    Args:
        content: Values passed to ``info``/``warn``/``error``/``debug``

    Returns:
        ``<null>`` for a single None, ``str(value)`` for a single value,
        and the values joined with ", " otherwise

    Examples:
        ("hi",) -> "hi"
        (None,) -> "<null>"
        ("a", "b", "c") -> "a, b, c"
        ("a", None) -> "a, None"
    """
    if len(content) == 1:
        (value,) = content
        return NULL_TEXT if value is None else str(value)
    return ", ".join(str(x) for x in content)


def exception_source(err: BaseException) -> str:
    """Name of the module whose code raised ``err``, or "unknown"."""
    tb = err.__traceback__
    if tb is None:
        return "unknown"
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame.f_globals.get("__name__") or "unknown"


def exception_body(err: BaseException) -> str:
    """Exception message followed by a newline and its stack trace."""
    trace = "".join(traceback.format_tb(err.__traceback__))
    return f"{err}\n{trace}"


def previous_log_path(path: str) -> str:
    return f"{path}{PREVIOUS_SUFFIX}"
