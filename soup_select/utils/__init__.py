"""
Utility modules for soup_select.
"""

from soup_select.utils.config import Config
from soup_select.utils.logging import (
    setup_logging,
    setup_logging_from_config,
    log_exception,
    PerformanceLogger,
)

__all__ = [
    'Config',
    'setup_logging',
    'setup_logging_from_config',
    'log_exception',
    'PerformanceLogger',
]
