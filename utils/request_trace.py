"""
Request trace formatter.

Dumps the full state of a request (parameters, session, cookies, headers and
attributes) as one indented text block at TRACE level. Useful for inspecting
requests during development; every call returns immediately if TRACE is not
enabled on the given logger.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, List, Optional

from models.request import BaseRequest, Session, WebRequest
from utils.logging_levels import TRACE_LEVEL

NULL_MARKER = "<none>"
INDENT = "  "


def _text(value: Any) -> str:
    if value is None:
        return NULL_MARKER
    return str(value)


def _timestamp(millis: Optional[int], tz: tzinfo) -> str:
    """Render epoch milliseconds as an ISO-8601 date-time in the given zone."""
    if millis is None:
        return NULL_MARKER
    # Resolve the zone last so fold is kept in the repeated DST hour
    moment = (
        datetime.fromtimestamp(millis // 1000, timezone.utc)
        .replace(microsecond=(millis % 1000) * 1000)
        .astimezone(tz)
    )
    return moment.isoformat(timespec="milliseconds")


class _TraceBuilder:
    """Accumulates indented lines for a single trace block."""

    def __init__(self, title: str):
        self.lines: List[str] = [f"{title} = {{"]

    def line(self, depth: int, text: str) -> None:
        self.lines.append(INDENT * depth + text)

    def field(self, depth: int, name: str, value: Any) -> None:
        self.line(depth, f"{name} = {_text(value)}")

    def build(self) -> str:
        return "\n".join(self.lines + ["}"])


def _append_session(trace: _TraceBuilder, session: Optional[Session], tz: tzinfo):
    trace.line(2, "session = {")
    if session is None:
        trace.line(3, "NONE")
    else:
        trace.field(3, "id", session.id)
        trace.line(3, f"creation_time = {_timestamp(session.creation_time, tz)}")
        trace.line(
            3, f"last_accessed_time = {_timestamp(session.last_accessed_time, tz)}"
        )
        trace.field(3, "max_inactive_interval", session.max_inactive_interval)
        trace.field(3, "is_new", session.is_new)

        trace.line(3, "attributes = {")
        for name, value in session.attributes.items():
            trace.field(4, name, value)
        trace.line(3, "}")
    trace.line(2, "}")


def _append_cookies(trace: _TraceBuilder, web: WebRequest) -> None:
    trace.line(2, "cookies = {")
    if web.cookies is None:
        trace.line(3, "NONE")
    else:
        for cookie in web.cookies:
            trace.line(3, f"{_text(cookie.name)} = {{")
            trace.field(4, "comment", cookie.comment)
            trace.field(4, "domain", cookie.domain)
            trace.field(4, "max_age", cookie.max_age)
            trace.field(4, "path", cookie.path)
            trace.field(4, "secure", cookie.secure)
            trace.field(4, "value", cookie.value)
            trace.field(4, "http_only", cookie.http_only)
            trace.line(3, "}")
    trace.line(2, "}")


def _append_headers(trace: _TraceBuilder, web: WebRequest) -> None:
    trace.line(2, "headers = {")
    for name, values in web.headers.items():
        trace.line(3, f"{name} = [")
        for value in values:
            trace.line(4, _text(value))
        trace.line(3, "]")
    trace.line(2, "}")


def _append_web_request(trace: _TraceBuilder, web: WebRequest, tz: tzinfo) -> None:
    trace.line(1, "WebRequest = {")

    trace.field(2, "request_uri", web.request_uri)
    trace.field(2, "query_string", web.query_string)
    trace.field(2, "method", web.method)
    trace.field(2, "requested_session_id", web.requested_session_id)
    trace.field(2, "requested_session_id_valid", web.requested_session_id_valid)

    _append_session(trace, web.session, tz)
    _append_cookies(trace, web)
    _append_headers(trace, web)

    trace.field(2, "request_url", web.request_url)
    trace.field(2, "remote_user", web.remote_user)
    trace.field(2, "auth_type", web.auth_type)
    trace.field(2, "context_path", web.context_path)
    trace.field(2, "servlet_path", web.servlet_path)
    trace.field(2, "path_info", web.path_info)
    trace.field(2, "path_translated", web.path_translated)
    trace.field(
        2, "requested_session_id_from_cookie", web.requested_session_id_from_cookie
    )
    trace.field(2, "requested_session_id_from_url", web.requested_session_id_from_url)

    trace.line(1, "}")


def format_request(request: BaseRequest, tz: tzinfo = timezone.utc) -> str:
    """Render the state of a request as an indented text block.

    Args:
        request: The request view to describe
        tz: Time zone used for session timestamps

    Returns:
        The multi-line trace text

    Raises:
        Any error raised while reading the request; use trace_log() for the
        fail-safe variant.
    """
    trace = _TraceBuilder("Request")

    trace.field(1, "remote_addr", request.remote_addr)

    trace.line(1, "parameters = {")
    for name, values in request.parameters.items():
        joined = ", ".join(_text(value) for value in values)
        trace.line(2, f"{name} = [{joined}]")
    trace.line(1, "}")

    web = request.as_web_request()
    if web is not None:
        _append_web_request(trace, web, tz)

    trace.field(1, "protocol", request.protocol)
    trace.field(1, "remote_host", request.remote_host)
    trace.field(1, "remote_port", request.remote_port)
    trace.field(1, "scheme", request.scheme)
    trace.field(1, "server_name", request.server_name)
    trace.field(1, "server_port", request.server_port)
    trace.field(1, "secure", request.secure)

    trace.field(1, "character_encoding", request.character_encoding)
    trace.field(1, "content_length", request.content_length)
    trace.field(1, "content_type", request.content_type)
    trace.field(1, "local_addr", request.local_addr)
    trace.field(1, "local_port", request.local_port)

    trace.line(1, "attributes = {")
    for name, value in request.attributes.items():
        trace.field(2, name, value)
    trace.line(1, "}")

    return trace.build()


def trace_log(
    logger: logging.Logger, request: BaseRequest, tz: tzinfo = timezone.utc
) -> None:
    """Generate a TRACE level log of the state of the given request.

    Nothing is logged (and the request is not read) unless TRACE is enabled
    on the logger. Any error raised while reading the request is logged at
    TRACE in place of the dump and never propagates to the caller.

    Args:
        logger: Logger to emit the dump on
        request: The request view to describe
        tz: Time zone used for session timestamps
    """
    if not logger.isEnabledFor(TRACE_LEVEL):
        return

    try:
        trace = format_request(request, tz)
    except Exception as ex:
        logger.log(
            TRACE_LEVEL, "error in trace_log(%r): %s", request, ex, exc_info=True
        )
        return

    logger.log(TRACE_LEVEL, trace)
