"""Tests for src.logging_config."""

import logging

import pytest

from src.logging_config import CONSOLE_HANDLER_NAME, setup_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def _console_handlers(self):
        return [h for h in logging.getLogger().handlers if h.get_name() == CONSOLE_HANDLER_NAME]

    def test_repeated_calls_install_one_handler(self, restore_root_level):
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(self._console_handlers()) == 1

    def test_later_call_changes_level(self, restore_root_level):
        setup_logging("info")
        setup_logging(logging.WARNING)

        assert logging.getLogger().level == logging.WARNING
        assert self._console_handlers()[0].level == logging.WARNING

    def test_third_party_loggers_quieted(self, restore_root_level):
        setup_logging(logging.DEBUG)

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("botocore").level == logging.WARNING
