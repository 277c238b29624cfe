"""
Unified logging utilities for the suppressions package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - configure_logging: Enable package logging and reset the console sink to a given level.
    - setup_logfile: Add file logging with rotation/compression.
    - setup_json_logfile: Add a JSON-format log file for machine parsing.
"""

import sys
from typing import Optional

from loguru import logger

__all__ = [
    "logger",
    "configure_logging",
    "setup_logfile",
    "setup_json_logfile",
]

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"

_console_sink_id: Optional[int] = None


def configure_logging(level: str = "WARNING", colorize: Optional[bool] = None) -> int:
    """
    Replace the console (stderr) sink with one at the requested level.

    Args:
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool, optional): Force colour on/off; auto-detected when None.

    Returns:
        int: The Loguru sink id of the console handler.
    """
    global _console_sink_id
    logger.enable("suppressions")
    if _console_sink_id is None:
        # Drop Loguru's default handler the first time we take over
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    if colorize is None:
        colorize = sys.stderr.isatty()
    # Resolve sys.stderr per message so redirected streams (CliRunner, pytest) are honoured
    _console_sink_id = logger.add(
        lambda message: sys.stderr.write(message),
        level=level.upper(),
        format=CONSOLE_FORMAT,
        colorize=colorize,
    )
    return _console_sink_id


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "INFO",
    colorize: bool = False
) -> int:
    """
    Add a rotating file handler to the global logger.

    Args:
        log_path (str): Path to the log file.
        rotation (str): Size or time string for log rotation.
        retention (str): How long to keep old logs.
        compression (str): Compression method for rotated logs.
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize file output (default: False).
    """
    logger.enable("suppressions")
    sink_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"Loguru file logging initialized: {log_path}")
    return sink_id


def setup_json_logfile(log_path: str, **kwargs) -> int:
    """
    Add a JSON-format log file (for machine parsing).
    Args:
        log_path (str): Path to JSON log file.
        **kwargs: Passed to logger.add().
    """
    logger.enable("suppressions")
    sink_id = logger.add(
        log_path,
        serialize=True,
        **kwargs
    )
    logger.info(f"Loguru JSON logging initialized: {log_path}")
    return sink_id
