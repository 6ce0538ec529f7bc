"""
Structured logging setup.

Two independent pipelines:
1. File (JSON) - only if config.file is set. Captures everything (DEBUG+).
2. Console (stderr) - level from config.level, raised by -v / -vv.

stdout is reserved for the validation report, so nothing here writes to it.
With --quiet the console pipeline is disabled entirely.
"""

import logging
import sys
from pathlib import Path

import structlog

from ..config.schema import LoggingConfig

_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(config: LoggingConfig, quiet: bool = False) -> None:
    """Configure both logging pipelines.

    Args:
        config: Logging configuration (level, file, verbose)
        quiet: If True, disables the console handler
    """
    for handler in logging.root.handlers:
        handler.close()
    logging.root.handlers.clear()
    structlog.reset_defaults()

    # Root logger captures everything; handlers filter by level
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[],
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    # ── Pipeline 1: JSON file ─────────────────────────────────────────────
    file_handler = None
    if config.file:
        file_path = Path(config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )
        logging.root.addHandler(file_handler)

    # ── Pipeline 2: Console ───────────────────────────────────────────────
    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_console_level(config))

        if file_handler:
            console_handler.setFormatter(
                structlog.stdlib.ProcessorFormatter(
                    processor=structlog.dev.ConsoleRenderer(
                        colors=sys.stderr.isatty(),
                    ),
                    foreign_pre_chain=shared_processors,
                )
            )

        logging.root.addHandler(console_handler)
    elif not file_handler:
        # Without any handler the stdlib lastResort would still print warnings
        logging.root.addHandler(logging.NullHandler())

    # ── structlog ─────────────────────────────────────────────────────────
    if file_handler:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfigured per invocation; cached loggers would keep stale processors
        cache_logger_on_first_use=False,
    )


def _console_level(config: LoggingConfig) -> int:
    """Console handler level.

    Without -v the configured level applies (WARNING by default).
    -v      -> INFO (discovery, config loaded)
    -vv+    -> DEBUG (every check result)
    """
    if config.verbose >= 2:
        return logging.DEBUG
    if config.verbose == 1:
        # -v only adds output: a configured "debug" level stays at DEBUG
        return min(logging.INFO, _LEVEL_NAMES[config.level])
    return _LEVEL_NAMES[config.level]
