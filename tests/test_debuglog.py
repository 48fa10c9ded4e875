import io
from datetime import datetime, timedelta, timezone

import pytest

from studykit.debuglog import (
    DEBUG_OFF_PREFIX,
    Logger,
    LoggerLevel,
    StatementLog,
    print_loggers,
)

MOMENT = datetime(2021, 4, 26, 11, 42, 57, tzinfo=timezone(timedelta(hours=3)))
FORMAT = "%Y-%m-%dT%H:%M:%S"


def _logger(debug):
    stream = io.StringIO()
    return Logger(FORMAT, debug, stream=stream, clock=lambda: MOMENT), stream


def test_log_line_layout():
    logger, stream = _logger(True)
    logger.log(LoggerLevel.INFO, "loggerTurnOn - This is a Info statement...")
    assert stream.getvalue() == (
        "[Info] 2021-04-26T11:42:57 loggerTurnOn - This is a Info statement...\n"
    )


@pytest.mark.parametrize("level", list(LoggerLevel))
def test_debug_on_never_prefixes(level):
    logger, stream = _logger(True)
    logger.log(level, "msg")
    line = stream.getvalue()
    assert line.startswith(f"[{level.value}] ")
    assert DEBUG_OFF_PREFIX not in line
    assert line.endswith(" msg\n")


@pytest.mark.parametrize(
    "level, prefixed",
    [
        (LoggerLevel.INFO, True),
        (LoggerLevel.DEBUG, True),
        (LoggerLevel.ERROR, False),
        (LoggerLevel.WARN, False),
    ],
)
def test_debug_off_prefixes_info_and_debug(level, prefixed):
    logger, stream = _logger(False)
    logger.log(level, "msg")
    assert (DEBUG_OFF_PREFIX + "msg" in stream.getvalue()) is prefixed


def test_switch_debug_toggles_and_returns_self():
    logger, stream = _logger(True)
    same = logger.switch_debug()
    assert same is logger
    assert logger.debug is False
    logger.log(LoggerLevel.INFO, "x")
    assert DEBUG_OFF_PREFIX in stream.getvalue()
    logger.switch_debug()
    assert logger.debug is True


def test_print_loggers_introduces_each_logger():
    first, stream = _logger(True)
    second = Logger(FORMAT, False, stream=stream, clock=lambda: MOMENT)
    print_loggers([first, second])
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(f"I'm logger[0] = {first!r}")
    assert lines[1].endswith(f"I'm logger[1] = {second!r}")
    assert all(line.startswith("[Info] ") for line in lines)


def test_statement_log_silent_when_debug_off():
    stream = io.StringIO()
    StatementLog(stream=stream, clock=lambda: MOMENT).log("Im aliasForLogging")
    assert stream.getvalue() == ""


def test_statement_log_writes_rfc3339():
    stream = io.StringIO()
    StatementLog(True, stream=stream, clock=lambda: MOMENT).log("Im aliasForLogging")
    assert stream.getvalue() == "2021-04-26T11:42:57+03:00 Im aliasForLogging\n"


def test_statement_log_utc_uses_z_suffix():
    stream = io.StringIO()
    moment = MOMENT.astimezone(timezone.utc)
    StatementLog(True, stream=stream, clock=lambda: moment).log("s")
    assert stream.getvalue().split(" ")[0].endswith("Z")