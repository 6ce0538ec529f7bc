"""
Tests para la configuración de logging.

Cubre:
- Nivel del console handler según level y -v
- Pipeline de archivo JSON
- --quiet sin handlers de consola
"""

import json
import logging
from pathlib import Path

import pytest
import structlog

from skillcheck.config.schema import LoggingConfig
from skillcheck.logging.setup import _console_level, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    for handler in logging.root.handlers:
        handler.close()
    logging.root.handlers.clear()
    structlog.reset_defaults()


class TestConsoleLevel:
    @pytest.mark.parametrize(
        "verbose,expected",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_verbose(self, verbose: int, expected: int):
        assert _console_level(LoggingConfig(verbose=verbose)) == expected

    def test_configured_level_without_verbose(self):
        assert _console_level(LoggingConfig(level="error")) == logging.ERROR
        assert _console_level(LoggingConfig(level="debug")) == logging.DEBUG

    def test_verbose_never_raises_the_level(self):
        assert _console_level(LoggingConfig(level="debug", verbose=1)) == logging.DEBUG


class TestConfigure:
    def test_quiet_has_no_stream_output(self):
        configure_logging(LoggingConfig(), quiet=True)
        handlers = logging.root.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_console_handler_on_stderr(self):
        configure_logging(LoggingConfig(verbose=1))
        [handler] = logging.root.handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.INFO

    def test_json_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "run.jsonl"
        configure_logging(LoggingConfig(file=log_file), quiet=True)
        structlog.get_logger("test").info("skills.discovered", count=2)
        for handler in logging.root.handlers:
            handler.flush()
        [line] = log_file.read_text().splitlines()
        record = json.loads(line)
        assert record["event"] == "skills.discovered"
        assert record["count"] == 2
        assert record["level"] == "info"

    def test_reconfigure_replaces_handlers(self):
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.root.handlers) == 1
