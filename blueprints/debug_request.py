"""Blueprint for /debug/request endpoint."""

from datetime import timezone
from typing import TYPE_CHECKING, Any, Optional

from flask import Blueprint, Response

from blueprints.helpers import create_api_error
from converters.flask_converter import convert_current_request
from utils.exceptions import RequestConversionError
from utils.logging_utils import get_server_logger
from utils.request_trace import format_request

if TYPE_CHECKING:
    from config import TraceConfigModel

logger = get_server_logger(__name__)

debug_request_bp = Blueprint("debug_request", __name__)

# Set by create_app() in trace_server.py
_trace_config: Optional["TraceConfigModel"] = None


def init_debug_request_blueprint(trace_config: "TraceConfigModel") -> None:
    """Initialize blueprint with configuration.

    Args:
        trace_config: The trace configuration
    """
    global _trace_config
    _trace_config = trace_config


@debug_request_bp.route(
    "/debug/request", methods=["GET", "POST", "PUT", "PATCH", "DELETE"]
)
def show_request() -> Any:
    """Return the trace dump of the current request as plain text."""
    logger.info("Received request to /debug/request")

    tz = _trace_config.get_tzinfo() if _trace_config else timezone.utc
    cookie_name = _trace_config.session_cookie_name if _trace_config else None

    try:
        web_request = convert_current_request(cookie_name)
        trace = format_request(web_request, tz)
    except RequestConversionError as e:
        logger.error(f"Could not convert request: {e}")
        return create_api_error(str(e))
    except Exception as e:
        logger.error(f"Could not format request: {e}", exc_info=True)
        return create_api_error(f"Could not format request: {e}")

    return Response(trace, status=200, mimetype="text/plain")
