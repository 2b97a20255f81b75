"""
debug.py - Debug and logging functionality for the Connect Four engine

This module provides a single debug manager wrapping the standard logging
module. Messages carry an optional component tag ("engine", "game", "env",
"cli") so output can be narrowed to the part of the system being inspected.
"""

import logging
import sys
import time
from enum import Enum
from typing import List, Optional, Dict, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Mapping to standard logging levels. TRACE messages go out through
# logger.debug, so the logger threshold for TRACE is DEBUG as well.
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Routes component-tagged debug messages to the connect_four logger."""

    def __init__(self, logger_name: str = "connect_four"):
        self._level = DebugLevel.INFO
        self._enabled = True
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # Empty set means all components
        self._logger = self._setup_logger(logger_name)
        self._performance_markers: Dict[str, float] = {}

    def _setup_logger(self, logger_name: str) -> logging.Logger:
        """Configure and return a logger instance."""
        logger = logging.getLogger(logger_name)
        logger.setLevel(LEVEL_MAP[self._level])

        # A second manager on the same logger must not stack console handlers
        if not logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def enabled(self) -> bool:
        return self._enabled

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None):
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether debugging is enabled
            log_file: Path to log file ("" disables file logging)
            components: Components to show messages for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """Determine if a message should be logged based on settings."""
        if not self._enabled:
            return False

        if level.value > self._level.value:
            return False

        if component and self._enabled_components and component not in self._enabled_components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        """
        Log a message at the specified level.

        Args:
            level: Debug level for the message
            message: The message to log
            component: Optional component name for filtering
        """
        if level == DebugLevel.NONE or not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.ERROR:
            self._logger.error(message)
        elif level == DebugLevel.WARNING:
            self._logger.warning(message)
        elif level == DebugLevel.INFO:
            self._logger.info(message)
        elif level == DebugLevel.DEBUG:
            self._logger.debug(message)
        else:
            self._logger.debug(f"TRACE: {message}")

    def error(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        """Start a timer for performance tracking."""
        self._performance_markers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        End a timer and log the elapsed time.

        Args:
            marker_name: Name of the marker to end
            component: Optional component name for the log entry

        Returns:
            Elapsed time in seconds, or None if marker not found
        """
        started = self._performance_markers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set debug level from a string (for command line arguments)."""
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.debug(f"Debug level set to {level.name}")
        return True


# Create a singleton instance
debug = DebugManager()
