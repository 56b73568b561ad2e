import io

from loguru import logger

from taglog import Logger, enable_diagnostics


def test_diagnostics_disabled_by_default(tmp_path):
    sink = io.StringIO()
    handler_id = logger.add(sink, level="DEBUG")
    try:
        Logger(tmp_path / "quiet.log", False)
    finally:
        logger.remove(handler_id)

    assert sink.getvalue() == ""


def test_enable_diagnostics(tmp_path):
    sink = io.StringIO()
    handler_id = enable_diagnostics(level="DEBUG", sink=sink)
    try:
        Logger(tmp_path / "loud.log", False)
    finally:
        logger.remove(handler_id)

    output = sink.getvalue()
    assert "Created log file" in output
    assert "Logger ready" in output
