# tests/unit/test_logging_config.py
"""Tests for CLI logging configuration."""

import logging

import pytest

from interactive_de.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        configure_logging(verbosity)
        assert logging.getLogger().level == level

    def test_info_is_silent_by_default(self, capsys):
        configure_logging()
        logging.getLogger("interactive_de.test").info("should not appear")
        assert capsys.readouterr().err == ""

    def test_warnings_go_to_stderr(self, capsys):
        configure_logging()
        logging.getLogger("interactive_de.test").warning("visible")
        captured = capsys.readouterr()
        assert "WARNING" in captured.err
        assert "visible" in captured.err
        assert captured.out == ""

    def test_single_handler(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1
