"""
Custom exception classes for the request trace logger.

These exceptions cover the parts of the package that are allowed to fail
loudly: configuration loading and request conversion. The trace formatter
itself never raises.
"""


class TraceLoggerException(Exception):
    """Base exception for the request trace logger."""

    pass


class ConfigValidationError(TraceLoggerException):
    """Raised when configuration validation fails.

    This includes unreadable JSON, out-of-range ports
    and unknown time zone names.
    """

    pass


class RequestConversionError(TraceLoggerException):
    """Raised when a framework request cannot be turned into a request view."""

    pass
