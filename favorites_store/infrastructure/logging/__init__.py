"""
Logging Infrastructure

Structured logging setup and performance logging helpers.
"""

from .logging_config import (
    JsonLogFormatter,
    PerformanceLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "JsonLogFormatter",
    "PerformanceLogger",
    "get_structured_logger",
    "setup_logging",
]
