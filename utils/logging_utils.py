"""
Logging configuration for the request trace logger.

This module sets up a hierarchical logging structure:
- app (parent logger with console output)
- app.server (trace server startup and Flask plumbing)
- app.trace (request trace dumps, emitted at TRACE level)

When a log folder is given, the parent logger also writes to
trace_YYYY-MM-DD_HH-MM-SS.log inside it.
"""

import logging
import os
import threading
from datetime import datetime
from typing import Optional

from utils.logging_levels import TRACE_LEVEL

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] [%(threadName)s] [%(filename)s:%(lineno)d]:  %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level flags for logging initialization
_setup_lock = threading.Lock()
_loggers_initialized = False
_log_timestamp = None


def resolve_level(debug: bool = False, trace: bool = False) -> int:
    """Map the CLI flags onto a logging level.

    Args:
        debug: Enable DEBUG output
        trace: Enable TRACE output (implies debug)

    Returns:
        The numeric logging level
    """
    if trace:
        return TRACE_LEVEL
    if debug:
        return logging.DEBUG
    return logging.INFO


def init_logging(
    debug: bool = False, trace: bool = False, log_folder: Optional[str] = None
) -> None:
    """Configure the main application logging.

    This function is idempotent and will only configure logging on the first call.
    Subsequent calls will be ignored to prevent reconfiguring the logging system.

    Args:
        debug: If True, set logging level to DEBUG
        trace: If True, set logging level to TRACE so request dumps are emitted
        log_folder: Optional directory for a timestamped log file
    """
    global _loggers_initialized, _log_timestamp

    with _setup_lock:
        if _loggers_initialized:
            return

        level = resolve_level(debug, trace)

        # Configure basic logging for console output
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Set up parent logger
        parent_logger = logging.getLogger("app")
        parent_logger.setLevel(level)

        if log_folder:
            if not os.path.exists(log_folder):
                os.makedirs(log_folder)

            _log_timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_path = os.path.join(log_folder, f"trace_{_log_timestamp}.log")
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            parent_logger.addHandler(file_handler)

        _loggers_initialized = True

        logging.getLogger("app").debug(
            f"Logging initialized at level {logging.getLevelName(level)}"
        )


def get_server_logger(name: str) -> logging.Logger:
    """Get the server logger for Flask routes and application setup.

    Args:
        name: Name suffix for the logger (e.g., 'routes' -> 'app.server.routes')

    Returns:
        Logger instance under app.server
    """
    return logging.getLogger("app.server." + name)


def get_trace_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger for request trace dumps.

    Args:
        name: Optional name suffix (e.g., 'requests' -> 'app.trace.requests')

    Returns:
        Logger instance under app.trace
    """
    if name:
        return logging.getLogger("app.trace." + name)
    return logging.getLogger("app.trace")
