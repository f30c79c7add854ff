"""
Configuration loading utilities using Pydantic models.

This module handles loading and parsing configuration from JSON files
using Pydantic v2 for validation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from utils.exceptions import ConfigValidationError

from .pydantic_models import TraceConfigModel


logger = logging.getLogger(__name__)


def load_config(file_path: str) -> TraceConfigModel:
    """Load configuration from a JSON file.

    The file should follow the structure:

    {
        "host": "127.0.0.1",
        "port": 3001,
        "logger_name": "app.trace.requests",
        "timezone": "UTC",
        "trace_all_requests": true,
        "debug_endpoint": true,
        "session_cookie_name": "session"
    }

    Every key is optional.

    Args:
        file_path: Path to the JSON configuration file

    Returns:
        TraceConfigModel instance with validated configuration

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ConfigValidationError: If the file is not valid JSON or fails validation
    """
    config_path = Path(file_path)
    if not config_path.exists():
        logger.error(f"Configuration file not found: {file_path}")
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    logger.debug(f"Loading configuration from: {file_path}")
    try:
        with open(config_path, "r") as file:
            config_json = json.load(file)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file: {e}")
        raise ConfigValidationError(f"Invalid JSON in {file_path}: {e}") from e

    config = validate_config_dict(config_json)
    logger.info(f"Successfully loaded configuration from {file_path}")
    return config


def validate_config_dict(config_dict: Dict[str, Any]) -> TraceConfigModel:
    """Validate a configuration dictionary and build the model.

    Args:
        config_dict: Dictionary to validate

    Returns:
        TraceConfigModel instance

    Raises:
        ConfigValidationError: If validation fails
    """
    if not isinstance(config_dict, dict):
        raise ConfigValidationError(
            f"Configuration must be a JSON object, got {type(config_dict).__name__}"
        )
    try:
        return TraceConfigModel(**config_dict)
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise ConfigValidationError(str(e)) from e
