"""Diagnostics for taglog itself, using loguru.

The ``taglog`` namespace is disabled on import so that a host application
sees nothing from the library unless it calls ``enable_diagnostics``.
"""

import sys
from typing import Any

from loguru import logger

logger.disable("taglog")


def enable_diagnostics(level: str = "DEBUG", sink: Any = None) -> int:
    """
    Turn on taglog's own diagnostic messages.

    Args:
        level: Minimum loguru level to emit
        sink: Where to send them (default: sys.stderr)

    Returns:
        The loguru handler id, for ``logger.remove()``
    """
    logger.enable("taglog")
    # colorize=True forces ANSI colors even without TTY
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        colorize=True,
        filter="taglog",
    )


__all__ = ["enable_diagnostics", "logger"]
