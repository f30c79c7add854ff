"""Shared utilities for Flask blueprints."""

from typing import Any, Tuple

from flask import jsonify


def create_error_response(
    error_type: str,
    message: str,
    status_code: int = 500,
) -> Tuple[Any, int]:
    """Create standardized error response.

    Args:
        error_type: Type of error (e.g., 'api_error')
        message: Error message
        status_code: HTTP status code (default: 500)

    Returns:
        Tuple of (jsonify(error), status_code)
    """
    error_response = jsonify(
        {
            "type": "error",
            "error": {
                "type": error_type,
                "message": message,
            },
        }
    )
    return error_response, status_code


def create_api_error(message: str, status_code: int = 500) -> Tuple[Any, int]:
    """Create API error response.

    Args:
        message: Error message
        status_code: HTTP status code (default: 500)

    Returns:
        Tuple of (jsonify(error), status_code)
    """
    return create_error_response(
        "api_error",
        message,
        status_code,
    )
