"""
Loguru logger configuration with runtime level control and deduplication
"""
from loguru import logger
import sys
import time
import threading
from pathlib import Path
from collections import deque
from typing import Dict, Any
from stockchart.config import settings
from stockchart.config.settings import LOG_LEVELS


VALID_LEVELS = LOG_LEVELS


class LogDeduplicationFilter:
    """Filter to suppress duplicate log messages from the same location.

    Tracks recent logs and suppresses duplicates based on:
    1. Same file path
    2. Same line number
    3. Within time threshold (default 1 second)

    Example:
        2025-11-29 20:39:58.268 | DEBUG | stockchart.foo:bar:24 - Cache hit RELIANCE
        2025-11-29 20:39:58.268 | DEBUG | stockchart.foo:bar:24 - Cache hit TCS    <- Suppressed
        ... (1.5 seconds later)
        2025-11-29 20:40:00.000 | DEBUG | stockchart.foo:bar:24 - Cache hit INFY   <- Allowed
    """

    def __init__(self, max_history: int = 5, time_threshold_seconds: float = 1.0):
        """Initialize deduplication filter.

        Args:
            max_history: Number of recent logs to track (default 5)
            time_threshold_seconds: Suppress duplicates within this time window (default 1.0s)
        """
        self.max_history = max_history
        self.time_threshold = time_threshold_seconds
        # Each entry: {"file": str, "line": int, "timestamp": float}
        self.recent_logs = deque(maxlen=max_history)
        self._lock = threading.Lock()

    def __call__(self, record: Dict[str, Any]) -> bool:
        """Return True to allow the record, False to suppress it."""
        current_file = record["file"].path
        current_line = record["line"]
        current_time = time.time()

        with self._lock:
            for recent in self.recent_logs:
                if recent["line"] == current_line and recent["file"] == current_file:
                    if current_time - recent["timestamp"] < self.time_threshold:
                        return False

            self.recent_logs.append({
                "file": current_file,
                "line": current_line,
                "timestamp": current_time
            })
            return True


class LoggerManager:
    """Manages application logging with runtime level control"""

    def __init__(self):
        self.current_level = settings.LOGGER.default_level.upper()
        self.log_file_path = Path(settings.LOGGER.file_path)
        self.log_rotation = settings.LOGGER.rotation
        self.log_retention = settings.LOGGER.retention

        self.dedup_filter = None
        if settings.LOGGER.filter_enabled:
            self.dedup_filter = LogDeduplicationFilter(
                max_history=settings.LOGGER.filter_max_history,
                time_threshold_seconds=settings.LOGGER.filter_time_threshold_seconds
            )

        self.setup_logger()

    def setup_logger(self):
        """Configure logger with console and file handlers"""
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.remove()

        # Only ERROR and above reach the console to keep CLI output clean
        logger.add(
            sys.stdout,
            level="ERROR",
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            colorize=True,
            backtrace=True,
            diagnose=True,
            filter=self.dedup_filter
        )

        logger.add(
            str(self.log_file_path),
            level=self.current_level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{name}:{function}:{line} - "
                "{message}"
            ),
            rotation=self.log_rotation,
            retention=self.log_retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            filter=self.dedup_filter
        )

        logger.info(f"Logger initialized with level: {self.current_level}")

    def set_level(self, level: str) -> str:
        """
        Change log level at runtime

        Args:
            level: New log level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)

        Returns:
            The new log level

        Raises:
            ValueError: If level is invalid
        """
        level_upper = level.upper()

        if level_upper not in VALID_LEVELS:
            raise ValueError(f"Invalid level '{level}'. Choose from: {', '.join(VALID_LEVELS)}")

        old_level = self.current_level
        self.current_level = level_upper

        self.setup_logger()

        logger.success(f"Log level changed from {old_level} to {level_upper}")
        return self.current_level

    def get_level(self) -> str:
        """Get current log level"""
        return self.current_level


# Global logger manager instance
logger_manager = LoggerManager()

# Export logger for use throughout the application
__all__ = ["logger", "logger_manager", "LogDeduplicationFilter"]
