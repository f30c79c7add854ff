"""Request view models consumed by the trace formatter."""

from .request import BaseRequest, Cookie, Session, WebRequest

__all__ = [
    "BaseRequest",
    "Cookie",
    "Session",
    "WebRequest",
]
