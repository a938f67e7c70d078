import logging

from symbolic_differentiation.logging_system import (
    LogLevel, configure_logging, get_logger, log_debug, log_info, log_milestone,
    log_stage, log_warning, set_log_level
)


def messages(caplog):
    return [record.getMessage() for record in caplog.records
            if record.name == 'symbolic_differentiation']


def test_levels_gate_messages(caplog):
    caplog.set_level(logging.DEBUG)
    configure_logging(LogLevel.MINIMAL)

    log_info("result")
    log_info("files", LogLevel.MODERATE)
    log_stage("parsed", "x")
    log_debug("details")
    log_warning("careful")

    assert messages(caplog) == ["result", "careful"]


def test_verbose_logs_everything(caplog):
    caplog.set_level(logging.DEBUG)
    configure_logging(LogLevel.VERBOSE)

    log_stage("parsed", "(x + 1)")
    log_debug("details")
    log_milestone("done")

    logged = messages(caplog)
    assert logged[0].startswith("STAGE parsed (")
    assert logged[0].endswith("): (x + 1)")
    assert logged[1:] == ["DEBUG: details", "MILESTONE: done"]


def test_silent_still_reports_critical(caplog):
    configure_logging(LogLevel.SILENT)

    log_milestone("done")
    get_logger().critical("broken")

    assert messages(caplog) == ["CRITICAL: broken"]


def test_set_log_level():
    configure_logging(LogLevel.SILENT)
    set_log_level(LogLevel.DETAILED)

    assert get_logger().log_level == LogLevel.DETAILED


def test_library_code_logs_at_debug(caplog, parse):
    caplog.set_level(logging.DEBUG)
    configure_logging(LogLevel.VERBOSE)

    parse("x + 1")

    assert any("Built tree of 3 nodes from 3 tokens" in m for m in messages(caplog))
