"""Utility modules for the Breakout project."""

from .logger import get_logger, get_log_path, setup_logging, LogLevel
from .save import append_save

__all__ = ['get_logger', 'get_log_path', 'setup_logging', 'LogLevel', 'append_save']
