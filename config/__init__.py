"""
Configuration management package for the request trace logger.

This package handles:
- The Pydantic configuration model (TraceConfigModel)
- Configuration loading from JSON files
"""

from .pydantic_models import TraceConfigModel
from .pydantic_loader import load_config, validate_config_dict

__all__ = [
    "TraceConfigModel",
    "load_config",
    "validate_config_dict",
]
