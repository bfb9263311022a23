"""
SDI Designer Logging
====================
Loguru sinks for the API server and the report CLI.

- Console sink on stderr, colored
- Optional rotating file sink under `settings.log_dir`
- uvicorn/fastapi records routed through loguru

The hydraulic core in `modules/` never logs; only the API and CLI do.
"""

from __future__ import annotations
import sys
import logging
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from .config import settings


LOG_FILE_NAME = "sdi_designer.log"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {extra[name]} | {message}"

# Frameworks whose stdlib loggers are forwarded to loguru
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")

logger.configure(extra={"name": "sdi_designer"})


class InterceptHandler(logging.Handler):
    """Forward a stdlib `logging` record to loguru, keeping the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(name=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _add_console_sink(level: str) -> None:
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True, diagnose=False)


def _add_file_sink(level: str, log_dir: Path, rotation: str, retention: str) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / LOG_FILE_NAME
    logger.add(
        str(path),
        format=FILE_FORMAT,
        level=level,
        rotation=rotation,
        retention=retention,
        compression="zip",
        diagnose=False,
        enqueue=True,
    )
    return path


def intercept_stdlib_logging(names: Iterable[str] = SERVER_LOGGERS) -> None:
    """Route the root stdlib logger and the named framework loggers to loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in names:
        framework_logger = logging.getLogger(name)
        framework_logger.handlers = [InterceptHandler()]
        framework_logger.propagate = False


def setup_logger(
    level: str = "INFO",
    console: bool = True,
    file: bool = False,
    log_dir: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "10 days",
) -> Optional[Path]:
    """
    Replace all loguru sinks with the requested ones.

    Returns:
        Path of the log file when file logging is on, else None
    """
    logger.remove()

    if console:
        _add_console_sink(level)

    log_file = None
    if file:
        log_file = _add_file_sink(level, log_dir or settings.log_dir, rotation, retention)

    intercept_stdlib_logging()
    return log_file


def get_logger(name: str = "sdi_designer"):
    """Logger tagged with a component name, e.g. `get_logger(__name__)`."""
    return logger.bind(name=name)


setup_logger(level=settings.log_level, console=True, file=settings.log_to_file)
