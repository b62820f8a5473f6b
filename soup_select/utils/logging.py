"""
Logging setup and helpers for soup_select.

All library loggers live under the ``soup_select`` namespace; nothing is
configured until an application calls setup_logging.
"""

import logging
import os
import sys
import time
from typing import Dict, Optional

ROOT_LOGGER_NAME = "soup_select"


def _level(name: Optional[str], default: int) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


class LogFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        # No ANSI colors on Windows consoles
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if self.colored and color:
            formatted_msg = formatted_msg.replace(record.levelname,
                                                  f"{color}{record.levelname}{self.RESET}", 1)
        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Configure the soup_select logger (or one of its components).

    Calling it again for a logger that already has handlers returns that
    logger unchanged.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level name
        file_level: File logging level name
        component: Optional component name, appended to ``soup_select.``
        colored: Whether console output uses ANSI colors

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = ROOT_LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger

    console = _level(console_level, logging.INFO)
    to_file = _level(file_level, logging.DEBUG)
    # Lowest handler level, so both handlers see their records
    logger.setLevel(min(console, to_file) if log_file else console)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_handler.setFormatter(LogFormatter(colored=colored,
                                              fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                                              datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(to_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config: 'Config', component: Optional[str] = None) -> logging.Logger:
    """Configure logging from the ``logging.*`` keys of a Config."""
    return setup_logging(log_file=config.get("logging.log_file"),
                         console_level=config.get("logging.console_level", "INFO"),
                         file_level=config.get("logging.file_level", "DEBUG"),
                         component=component)


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at ERROR with its traceback.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Text placed before the exception message
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times named operations and logs their duration at DEBUG."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str) -> float:
        """
        Stop timing an operation and log how long it took.

        Returns:
            float: Duration in seconds, or 0.0 if the operation was never started
        """
        if name not in self.start_times:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - self.start_times.pop(name)
        self.logger.debug(f"{self.component} {name} took {duration:.4f} seconds")
        return duration

    def clear(self) -> None:
        """Forget all unfinished timings."""
        self.start_times.clear()
