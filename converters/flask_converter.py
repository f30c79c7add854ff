"""Flask request converter.

Builds the WebRequest view the trace formatter walks from a live Flask
(werkzeug) request. Attribute and session values are stringified here so the
formatter never has to introspect application objects.
"""

from datetime import timedelta
from logging import Logger
from typing import Any, Dict, List, Mapping, Optional

from flask import Request, current_app, g, has_request_context, request, session

from models.request import Cookie, Session, WebRequest
from utils.exceptions import RequestConversionError
from utils.logging_utils import get_server_logger

logger: Logger = get_server_logger(__name__)


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _stringify(values: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not values:
        return {}
    return {str(name): str(value) for name, value in values.items()}


def _collect_parameters(flask_request: Request) -> Dict[str, List[str]]:
    """Merge query string and form parameters, query string first."""
    parameters: Dict[str, List[str]] = {}
    for source in (flask_request.args, flask_request.form):
        for name, values in source.lists():
            parameters.setdefault(name, []).extend(values)
    return parameters


def _collect_headers(flask_request: Request) -> Dict[str, List[str]]:
    headers: Dict[str, List[str]] = {}
    for name, value in flask_request.headers.items():
        headers.setdefault(name, []).append(value)
    return headers


def _collect_cookies(flask_request: Request) -> Optional[List[Cookie]]:
    # No Cookie header at all is reported as None, not as an empty list
    if "Cookie" not in flask_request.headers:
        return None
    return [
        Cookie(name=name, value=value)
        for name, value in flask_request.cookies.items(multi=True)
    ]


def _convert_session(
    flask_session: Optional[Mapping[str, Any]],
    requested_session_id: Optional[str],
    permanent_session_lifetime: Optional[timedelta],
) -> Optional[Session]:
    if not flask_session:
        return None

    max_inactive_interval = -1
    if getattr(flask_session, "permanent", False) and permanent_session_lifetime:
        max_inactive_interval = int(permanent_session_lifetime.total_seconds())

    return Session(
        id=requested_session_id,
        max_inactive_interval=max_inactive_interval,
        is_new=requested_session_id is None,
        attributes=_stringify(flask_session),
    )


def convert_flask_request(
    flask_request: Request,
    flask_session: Optional[Mapping[str, Any]] = None,
    attributes: Optional[Mapping[str, Any]] = None,
    session_cookie_name: str = "session",
    permanent_session_lifetime: Optional[timedelta] = None,
) -> WebRequest:
    """Convert a Flask request into a WebRequest view.

    Args:
        flask_request: The Flask or werkzeug request
        flask_session: Session mapping for the request, if any
        attributes: Request-scoped values to report as request attributes
        session_cookie_name: Cookie that carries the session id
        permanent_session_lifetime: Lifetime applied to permanent sessions

    Returns:
        WebRequest populated from the request

    Raises:
        RequestConversionError: If the request cannot be read
    """
    try:
        environ = flask_request.environ
        server = flask_request.server
        server_name, server_port = server if server else (None, None)

        requested_session_id = flask_request.cookies.get(session_cookie_name)
        session_view = _convert_session(
            flask_session, requested_session_id, permanent_session_lifetime
        )

        authorization = flask_request.authorization
        url_rule = getattr(flask_request, "url_rule", None)

        return WebRequest(
            remote_addr=flask_request.remote_addr,
            parameters=_collect_parameters(flask_request),
            protocol=environ.get("SERVER_PROTOCOL"),
            remote_host=environ.get("REMOTE_HOST") or flask_request.remote_addr,
            remote_port=_to_int(environ.get("REMOTE_PORT")),
            scheme=flask_request.scheme,
            server_name=server_name,
            server_port=server_port,
            secure=flask_request.is_secure,
            character_encoding=flask_request.mimetype_params.get("charset"),
            content_length=flask_request.content_length,
            content_type=flask_request.content_type,
            local_addr=environ.get("SERVER_ADDR"),
            local_port=server_port,
            attributes=_stringify(attributes),
            request_uri=flask_request.path,
            query_string=flask_request.query_string.decode("latin-1") or None,
            method=flask_request.method,
            requested_session_id=requested_session_id,
            requested_session_id_valid=(
                requested_session_id is not None and session_view is not None
            ),
            session=session_view,
            cookies=_collect_cookies(flask_request),
            headers=_collect_headers(flask_request),
            request_url=flask_request.base_url,
            remote_user=flask_request.remote_user,
            auth_type=authorization.type if authorization else None,
            context_path=flask_request.script_root,
            servlet_path=url_rule.rule if url_rule is not None else None,
            path_info=environ.get("PATH_INFO"),
            path_translated=environ.get("PATH_TRANSLATED"),
            requested_session_id_from_cookie=requested_session_id is not None,
            requested_session_id_from_url=False,
        )
    except Exception as e:
        logger.debug(f"Failed to convert request: {e}")
        raise RequestConversionError(f"Cannot convert request: {e}") from e


def convert_current_request(session_cookie_name: Optional[str] = None) -> WebRequest:
    """Convert the active Flask request, its session and ``flask.g``.

    Args:
        session_cookie_name: Overrides the app's SESSION_COOKIE_NAME

    Returns:
        WebRequest for the current request

    Raises:
        RequestConversionError: If called outside a request context
    """
    if not has_request_context():
        raise RequestConversionError("No active Flask request context")

    cookie_name = session_cookie_name or current_app.config.get(
        "SESSION_COOKIE_NAME", "session"
    )
    return convert_flask_request(
        request._get_current_object(),
        flask_session=session,
        attributes={name: g.get(name) for name in g},
        session_cookie_name=cookie_name,
        permanent_session_lifetime=current_app.permanent_session_lifetime,
    )
