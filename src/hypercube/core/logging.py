"""
Unified logging utilities for the hypercube package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - configure_console: Route console logging to stderr at a chosen verbosity.
    - setup_logfile: Add file logging with rotation/compression.
    - setup_json_logfile: Add a JSON-format log file for machine parsing.

Frame output goes to stdout; every log sink added here writes elsewhere.
"""

import sys
from loguru import logger

__all__ = [
    "logger",
    "configure_console",
    "setup_logfile",
    "setup_json_logfile",
]

_console_sink_id = None


def configure_console(verbose: bool = False) -> int:
    """
    Replace the console sink with a stderr sink.

    Args:
        verbose (bool): DEBUG level if True, otherwise WARNING.

    Returns:
        int: The loguru sink id.
    """
    global _console_sink_id
    if _console_sink_id is None:
        # Drop loguru's default handler on first call
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    return _console_sink_id


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "DEBUG",
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

    Returns:
        int: The loguru sink id.
    """
    sink_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        backtrace=True,
        diagnose=True,
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
    sink_id = logger.add(
        log_path,
        serialize=True,
        **kwargs
    )
    logger.info(f"Loguru JSON logging initialized: {log_path}")
    return sink_id
