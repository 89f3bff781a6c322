import io
import re

import pytest

from wideriver.enums import LogThreshold
from wideriver.log import COLUMN_WIDTH, Log

PREFIX = r"[DIWEF] \[\d\d:\d\d:\d\d\] "


def make_log(threshold=LogThreshold.DEBUG):
    out, err = io.StringIO(), io.StringIO()
    return Log(threshold, out, err), out, err


def test_info_goes_to_out_with_prefix():
    log, out, err = make_log()
    log.info("hello")
    assert re.fullmatch(r"I \[\d\d:\d\d:\d\d\] hello\n", out.getvalue())
    assert err.getvalue() == ""


def test_errors_go_to_err():
    log, out, err = make_log()
    log.error("bad")
    log.fatal("worse")
    lines = err.getvalue().splitlines()
    assert lines[0].startswith("E [") and lines[0].endswith("bad")
    assert lines[1].startswith("F [") and lines[1].endswith("worse")
    assert out.getvalue() == ""


def test_threshold_filters():
    log, out, err = make_log(LogThreshold.WARNING)
    log.debug("d")
    log.info("i")
    log.warning("w")
    assert out.getvalue().count("\n") == 1
    assert out.getvalue().startswith("W [")


def test_set_threshold_by_name():
    log, out, _ = make_log(LogThreshold.FATAL)
    log.set_threshold("DEBUG")
    assert log.threshold is LogThreshold.DEBUG
    log.debug("now")
    assert out.getvalue().endswith("now\n")


def test_set_threshold_invalid():
    log, _, _ = make_log(LogThreshold.ERROR)
    with pytest.raises(ValueError):
        log.set_threshold("verbose")
    assert log.threshold is LogThreshold.ERROR


def test_columns():
    log, out, _ = make_log()
    log.column_start("start")
    log.column("x" * 40)
    log.column_end("end")
    text = out.getvalue()
    match = re.fullmatch(PREFIX + r"(.*)\n", text)
    assert match
    body = match.group(1)
    assert body[:COLUMN_WIDTH] == "start".ljust(COLUMN_WIDTH)
    assert body[COLUMN_WIDTH : 2 * COLUMN_WIDTH] == "x" * (COLUMN_WIDTH - 1) + " "
    assert body[2 * COLUMN_WIDTH :] == "end"


def test_columns_hidden_above_debug():
    log, out, _ = make_log(LogThreshold.INFO)
    log.column_start("a")
    log.column("b")
    log.column_end("c")
    assert out.getvalue() == ""