"""Flask hooks that trace every incoming request."""

import logging
from datetime import timezone, tzinfo
from typing import Optional

from flask import Flask

from converters.flask_converter import convert_current_request
from utils.exceptions import RequestConversionError
from utils.logging_levels import TRACE_LEVEL, is_trace_enabled
from utils.logging_utils import get_trace_logger
from utils.request_trace import trace_log


def install_request_trace(
    app: Flask,
    logger: Optional[logging.Logger] = None,
    tz: tzinfo = timezone.utc,
    session_cookie_name: Optional[str] = None,
) -> None:
    """Register a before_request hook that dumps each request at TRACE level.

    The hook returns None so request dispatch continues unchanged. When TRACE
    is disabled on the logger the request is not converted at all.

    Args:
        app: Flask application
        logger: Logger to emit dumps on (defaults to app.trace.requests)
        tz: Time zone for session timestamps
        session_cookie_name: Overrides the app's SESSION_COOKIE_NAME
    """
    trace_logger = logger or get_trace_logger("requests")

    @app.before_request
    def _trace_request():
        if not is_trace_enabled(trace_logger):
            return None

        try:
            web_request = convert_current_request(session_cookie_name)
        except RequestConversionError as e:
            trace_logger.log(TRACE_LEVEL, "error converting request for trace: %s", e)
            return None

        trace_log(trace_logger, web_request, tz)
        return None
