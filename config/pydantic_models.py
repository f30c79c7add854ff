"""
Pydantic-based configuration models for the request trace logger.

This module provides the configuration schema for the trace server using
Pydantic v2 with automatic validation and serialization.
"""

from datetime import timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TraceConfigModel(BaseModel):
    """Configuration for request tracing and the demo trace server."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3001, ge=1, le=65535)
    logger_name: str = Field(
        default="app.trace.requests",
        description="Logger the request dumps are emitted on",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA time zone used to render session timestamps",
    )
    trace_all_requests: bool = Field(
        default=True,
        description="Install a before_request hook that traces every request",
    )
    debug_endpoint: bool = Field(
        default=True,
        description="Register the /debug/request blueprint",
    )
    session_cookie_name: str = Field(default="session")
    secret_key: Optional[str] = Field(
        default=None,
        description="Flask secret key; without it sessions are never stored",
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        if value.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value}") from e
        return value

    def get_tzinfo(self) -> tzinfo:
        """Return the configured time zone as a tzinfo instance."""
        if self.timezone == "UTC":
            return timezone.utc
        return ZoneInfo(self.timezone)
