"""
Configuration module.

Frozen-dataclass defaults, YAML settings overrides and validation.
"""
from .defaults import DefaultConfig, GradeParams, LoggingParams, QueryParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidationError, ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidationError",
    "ConfigValidator",
    "DefaultConfig",
    "GradeParams",
    "LoggingParams",
    "QueryParams",
    "ValidationError",
    "get_default_config",
]
