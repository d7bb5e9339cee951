"""
Unit tests: package logger handlers across Streamlit reruns
"""
import logging

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.infra.logging import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    PACKAGE_LOGGER,
    LoggerManager,
    configure_logging,
    get_logger,
    set_log_level,
)


def _handlers(name):
    return [h for h in logging.getLogger(PACKAGE_LOGGER).handlers if h.get_name() == name]


@pytest.fixture(autouse=True)
def clean_package_logger():
    LoggerManager.reset()
    yield
    LoggerManager.reset()


class TestConsoleHandler:

    def test_installed_once(self):
        for _ in range(3):
            get_logger("eleccalc.calculations.wire")
        assert len(_handlers(CONSOLE_HANDLER_NAME)) == 1

    def test_default_level_is_info(self):
        get_logger("eleccalc.app")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_reset_removes_handlers(self):
        get_logger("eleccalc.app")
        LoggerManager.reset()
        assert _handlers(CONSOLE_HANDLER_NAME) == []


class TestLogFile:

    def test_same_path_twice_keeps_one_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "eleccalc.log"
        assert LoggerManager.set_log_file(log_file) is True
        assert LoggerManager.set_log_file(log_file) is False
        assert len(_handlers(FILE_HANDLER_NAME)) == 1
        assert log_file.parent.is_dir()

    def test_new_path_replaces_handler(self, tmp_path):
        LoggerManager.set_log_file(tmp_path / "a.log")
        LoggerManager.set_log_file(tmp_path / "b.log")
        handlers = _handlers(FILE_HANDLER_NAME)
        assert len(handlers) == 1
        assert handlers[0].baseFilename.endswith("b.log")

    def test_records_reach_file(self, tmp_path):
        log_file = tmp_path / "eleccalc.log"
        LoggerManager.set_log_file(log_file)
        get_logger("eleccalc.calculations.dc").info("sized 10 AWG")
        for h in _handlers(FILE_HANDLER_NAME):
            h.flush()
        assert "[eleccalc.calculations.dc:" in log_file.read_text(encoding="utf-8")


class TestLevel:

    def test_set_level(self):
        assert set_log_level("debug") is True
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert set_log_level("DEBUG") is False

    def test_unknown_level_ignored(self):
        set_log_level("WARNING")
        assert set_log_level("LOUD") is False
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING


class TestConfigure:

    def test_repeated_configure_is_stable(self, tmp_path):
        log_file = tmp_path / "eleccalc.log"
        for _ in range(5):
            configure_logging("WARNING", log_file)
        logger = logging.getLogger(PACKAGE_LOGGER)
        assert logger.level == logging.WARNING
        assert len(_handlers(CONSOLE_HANDLER_NAME)) == 1
        assert len(_handlers(FILE_HANDLER_NAME)) == 1

    def test_without_file(self):
        configure_logging("ERROR")
        assert _handlers(FILE_HANDLER_NAME) == []
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
