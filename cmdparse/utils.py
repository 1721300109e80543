# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for the `cmdparse` console script.

The library modules only log through the `cmdparse` logger and never install
handlers. `setup_logging()` attaches them once, at startup:

- "cli" mode renders records with Rich on stderr.
- "json" mode writes one JSON object per record, for log collectors.

The number of `-v` flags picks the level: none shows warnings, one adds info
records, two or more add the per-token validation trace.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from cmdparse.console import error_console
from cmdparse.logger import logger

LOG_MODES = ("cli", "json")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=error_console,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def setup_logging(
    mode: str | None = None,
    verbosity: int = 0,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
) -> None:
    """
    Attach console (and optionally file) handlers to the `cmdparse` logger.

    Calling it again replaces the handlers installed by the previous call. The
    root logger is left untouched.

    Args:
        mode (str | None): "cli" or "json". Defaults to the `CMDPARSE_LOG_MODE`
            environment variable, then "cli".
        verbosity (int): Number of `-v` flags given on the command line.
        log_filename (str | None): Also append every record, DEBUG included, to
            this file.
        json_log_to_file (bool): Write the file as JSON lines instead of text.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`.
    """
    mode = mode or os.getenv("CMDPARSE_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(
            f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}"
        )

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = verbosity_to_level(verbosity)
    logger.setLevel(logging.DEBUG if log_filename else level)
    logger.propagate = False

    console_handler = build_console_handler(mode)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        logger.addHandler(file_handler)

    logger.debug(
        "Logging initialized in '%s' mode at %s", mode, logging.getLevelName(level)
    )
