"""Shared fixtures for unit tests."""

import pytest
from flask import Flask

from models.request import BaseRequest, Cookie, Session, WebRequest

# 2012-01-01T00:00:00.123Z
CREATED_MILLIS = 1325376000123
# 2012-01-01T00:01:00.000Z
ACCESSED_MILLIS = 1325376060000


@pytest.fixture
def base_request() -> BaseRequest:
    """A request exposing only the transport-level fields."""
    return BaseRequest(
        remote_addr="10.0.0.1",
        parameters={"q": ["a", "b", "c"]},
        protocol="HTTP/1.1",
        remote_host="client.local",
        remote_port=52100,
        scheme="http",
        server_name="localhost",
        server_port=8080,
        secure=False,
        local_addr="127.0.0.1",
        local_port=8080,
        attributes={"user": "alice"},
    )


@pytest.fixture
def session_view() -> Session:
    """A populated session."""
    return Session(
        id="abc123",
        creation_time=CREATED_MILLIS,
        last_accessed_time=ACCESSED_MILLIS,
        max_inactive_interval=1800,
        is_new=False,
        attributes={"cart": "3 items"},
    )


@pytest.fixture
def web_request() -> WebRequest:
    """A request exposing the HTTP-specific fields, without session or cookies."""
    return WebRequest(
        remote_addr="10.0.0.1",
        parameters={"q": ["a"]},
        protocol="HTTP/1.1",
        remote_host="client.local",
        remote_port=52100,
        scheme="https",
        server_name="example.com",
        server_port=443,
        secure=True,
        character_encoding="utf-8",
        content_length=0,
        content_type="text/plain",
        local_addr="127.0.0.1",
        local_port=443,
        request_uri="/search",
        query_string="q=a",
        method="GET",
        headers={"Accept": ["text/html", "application/json"], "Host": ["example.com"]},
        request_url="https://example.com/search",
        context_path="",
        servlet_path="/search",
        path_info="/search",
    )


@pytest.fixture
def cookie() -> Cookie:
    return Cookie(name="theme", value="dark", path="/", max_age=3600, http_only=True)


@pytest.fixture
def flask_app() -> Flask:
    """Bare Flask app for request contexts."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    return app
