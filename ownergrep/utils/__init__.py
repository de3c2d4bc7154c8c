# ownergrep/utils/__init__.py
"""Utility modules for ownergrep."""

from ownergrep.utils.logger import logger, setup_logger, get_logger, log_exception, log_performance

__all__ = ["logger", "setup_logger", "get_logger", "log_exception", "log_performance"]
