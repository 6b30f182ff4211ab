import logging

from CrxTool.util import (log_debug, log_error, log_exception, value_of,
                          NO_EXTID)


def test_log_error_prefixes_extid(caplog):
    with caplog.at_level(logging.ERROR):
        log_error("broken payload", 1, "a" * 32)
    assert caplog.records[-1].levelno == logging.ERROR
    assert caplog.records[-1].getMessage() == "a" * 32 + "     broken payload"


def test_log_without_extid_uses_dashes(caplog):
    with caplog.at_level(logging.DEBUG):
        log_debug("parsed")
    assert caplog.records[-1].getMessage() == NO_EXTID + " parsed"


def test_log_exception_includes_traceback(caplog):
    with caplog.at_level(logging.ERROR):
        try:
            raise ValueError("boom")
        except ValueError:
            log_exception("failed")
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == NO_EXTID + " failed"
    assert any("ValueError: boom" in m for m in messages)


def test_value_of():
    assert value_of(None, ".") == "."
    assert value_of("", ".") == "."
    assert value_of("out", ".") == "out"
