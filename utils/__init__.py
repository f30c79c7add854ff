"""
Utility functions package for the request trace logger.

This package handles:
- The TRACE logging level and logging configuration
- The request trace formatter
- Flask request hooks
- Custom exceptions
"""

from .logging_levels import TRACE_LEVEL
from .logging_utils import init_logging, get_server_logger, get_trace_logger
from .request_trace import format_request, trace_log

__all__ = [
    "TRACE_LEVEL",
    "init_logging",
    "get_server_logger",
    "get_trace_logger",
    "format_request",
    "trace_log",
]
