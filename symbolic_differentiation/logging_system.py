"""
Pipeline logging for symbolic differentiation.

The library itself only emits debug lines. How much reaches stderr (and an
optional log file) is decided once, by whoever calls configure_logging(),
usually the command line entry point.
"""

import logging
import sys
import time
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

LOGGER_NAME = 'symbolic_differentiation'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class LogLevel(Enum):
    """How chatty a run is, from errors only up to per-pass debug lines"""
    SILENT = 0      # Critical errors only
    MINIMAL = 1     # Plus warnings and final results
    MODERATE = 2    # Plus written files
    DETAILED = 3    # Plus the tree after each pipeline stage
    VERBOSE = 4     # Plus builder/differentiator/optimizer debug lines


class DifferentiationLogger:
    """
    Owns the 'symbolic_differentiation' stdlib logger and filters messages by LogLevel.

    Creating an instance replaces the handlers of any previous one, so the
    most recent configure_logging() call wins.
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.started_at = time.perf_counter()

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        if log_level == LogLevel.SILENT:
            console.setLevel(logging.ERROR)
        self.logger.addHandler(console)

        self.log_file_path = None
        if log_to_file:
            self.log_file_path = log_file_path or self._default_log_file()
            file_handler = logging.FileHandler(self.log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @staticmethod
    def _default_log_file() -> str:
        return f"symbolic_differentiation_{datetime.now():%Y%m%d_%H%M%S}.log"

    def enabled(self, required_level: LogLevel) -> bool:
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Errors that abort the current run. Shown at every level."""
        self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        if self.enabled(required_level):
            self.logger.info(message)

    def stage(self, name: str, tree_text: str):
        """Infix form of the tree produced by one pipeline stage"""
        if self.enabled(LogLevel.DETAILED):
            elapsed = time.perf_counter() - self.started_at
            self.logger.info(f"STAGE {name} ({elapsed:.3f}s): {tree_text}")

    def outputs_written(self, paths: Iterable[Path]):
        if self.enabled(LogLevel.MODERATE):
            for path in paths:
                self.logger.info(f"Wrote {path}")

    def milestone(self, message: str):
        if self.log_level != LogLevel.SILENT:
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        if self.enabled(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        if self.enabled(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


_global_logger: Optional[DifferentiationLogger] = None


def get_logger() -> DifferentiationLogger:
    """Process-wide logger, created with default settings on first use"""
    global _global_logger
    if _global_logger is None:
        _global_logger = DifferentiationLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Change the level without touching handlers"""
    get_logger().log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> DifferentiationLogger:
    global _global_logger
    _global_logger = DifferentiationLogger(log_level, log_to_file, log_file_path)
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    get_logger().info(message, level)


def log_stage(name: str, tree_text: str):
    get_logger().stage(name, tree_text)


def log_outputs(paths: Iterable[Path]):
    get_logger().outputs_written(paths)


def log_milestone(message: str):
    get_logger().milestone(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_critical(message: str):
    get_logger().critical(message)


def log_debug(message: str):
    get_logger().debug(message)
