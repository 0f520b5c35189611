"""Tests for finances.log."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from finances.log import setup_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's level and handlers afterwards."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_rich_handler(self, root_logger: logging.Logger) -> None:
        """Should log through a single Rich handler."""
        setup_logging("INFO")

        assert root_logger.level == logging.INFO
        assert [type(handler) for handler in root_logger.handlers] == [RichHandler]

    def test_second_call_changes_level(self, root_logger: logging.Logger) -> None:
        """Should apply the latest level when called again."""
        setup_logging("WARNING")
        setup_logging("DEBUG")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_numeric_level(self, root_logger: logging.Logger) -> None:
        setup_logging(logging.ERROR)

        assert root_logger.level == logging.ERROR
