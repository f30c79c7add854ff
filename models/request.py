"""
Request view dataclasses.

These are the read-only shapes the trace formatter walks. A caller (or one of
the converters) builds them from a framework request right before formatting.

Two variants exist: BaseRequest carries the transport-level fields every
request has, and WebRequest adds the HTTP-specific ones (URI, session,
cookies, headers). The formatter asks for the extended view through
``as_web_request()`` instead of checking types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Cookie:
    """A single request cookie."""

    name: str
    value: Optional[str] = None
    comment: Optional[str] = None
    domain: Optional[str] = None
    max_age: int = -1
    path: Optional[str] = None
    secure: bool = False
    http_only: bool = False


@dataclass
class Session:
    """Server-side session state attached to a request.

    Timestamps are epoch milliseconds; ``max_inactive_interval`` is in seconds
    and is negative when the session never times out.
    """

    id: Optional[str] = None
    creation_time: Optional[int] = None
    last_accessed_time: Optional[int] = None
    max_inactive_interval: int = -1
    is_new: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BaseRequest:
    """Transport-level view of a request."""

    remote_addr: Optional[str] = None
    parameters: Dict[str, List[str]] = field(default_factory=dict)
    protocol: Optional[str] = None
    remote_host: Optional[str] = None
    remote_port: Optional[int] = None
    scheme: Optional[str] = None
    server_name: Optional[str] = None
    server_port: Optional[int] = None
    secure: bool = False
    character_encoding: Optional[str] = None
    content_length: Optional[int] = None
    content_type: Optional[str] = None
    local_addr: Optional[str] = None
    local_port: Optional[int] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def as_web_request(self) -> Optional["WebRequest"]:
        """Return the HTTP-specific view, or None if this request has none."""
        return None


@dataclass
class WebRequest(BaseRequest):
    """HTTP view of a request.

    ``cookies`` is None when the client sent no Cookie header, which is
    different from an empty list.
    """

    request_uri: Optional[str] = None
    query_string: Optional[str] = None
    method: Optional[str] = None
    requested_session_id: Optional[str] = None
    requested_session_id_valid: bool = False
    session: Optional[Session] = None
    cookies: Optional[List[Cookie]] = None
    headers: Dict[str, List[str]] = field(default_factory=dict)
    request_url: Optional[str] = None
    remote_user: Optional[str] = None
    auth_type: Optional[str] = None
    context_path: Optional[str] = None
    servlet_path: Optional[str] = None
    path_info: Optional[str] = None
    path_translated: Optional[str] = None
    requested_session_id_from_cookie: bool = False
    requested_session_id_from_url: bool = False

    def as_web_request(self) -> Optional["WebRequest"]:
        return self
