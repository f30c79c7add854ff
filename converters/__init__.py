"""Request conversion module.

This module turns framework requests into the request views the trace
formatter understands.

Usage:
    from converters import convert_current_request
    from utils.request_trace import trace_log

    trace_log(logger, convert_current_request())
"""

from converters.flask_converter import convert_current_request, convert_flask_request

__all__ = [
    "convert_current_request",
    "convert_flask_request",
]
