"""
Logging Package.

Opt-in console and rotating file output for the package logger.
"""

from .logger import reset_logger, setup_logger

__all__ = ["setup_logger", "reset_logger"]
