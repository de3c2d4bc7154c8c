# ownergrep/utils/logger.py
"""
Centralized Logging System for ownergrep

Uses loguru with:
- Console output with colors (stderr)
- Optional rotating log file
"""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger as _loguru_logger

# Export the logger instance directly
logger = _loguru_logger

# Remove default handler
logger.remove()


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Setup the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to the log file, if any
        rotation: When to rotate log files
        retention: How long to keep old logs
    """
    # Clear existing handlers
    logger.remove()

    level = level.upper()

    # Console handler goes to stderr so stdout only carries the report
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path),
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            backtrace=True,
            diagnose=True,
        )

    logger.debug(f"Logging initialized at level {level}")


def get_logger(name: str) -> Any:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the module

    Returns:
        Logger instance bound to the module name
    """
    return logger.bind(name=name)


def log_exception(exc: Exception, context: Optional[dict[str, Any]] = None) -> None:
    """
    Log an exception with its traceback.

    Args:
        exc: The exception to log
        context: Additional context, bound to the record
    """
    context = context or {}
    logger.bind(**context).opt(exception=exc).error(f"Exception occurred: {type(exc).__name__}: {exc}")


def log_performance(
    operation: str,
    duration_ms: float,
    metadata: Optional[dict[str, Any]] = None,
) -> None:
    """
    Log performance metrics.

    Args:
        operation: Name of the operation
        duration_ms: Duration in milliseconds
        metadata: Additional metadata
    """
    metadata = metadata or {}
    logger.debug(f"[PERF] {operation}: {duration_ms:.2f}ms | {metadata}")
