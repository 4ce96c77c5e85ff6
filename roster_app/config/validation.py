"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any, Optional

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidationError(Exception):
    """Raised when merged configuration fails validation."""

    def __init__(self, message: str, errors: Optional[list[ValidationError]] = None):
        super().__init__(message)
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_query_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate roster query parameters."""
        errors = []

        if "courses" in params:
            value = params["courses"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(c, str) for c in value):
                errors.append(ValidationError(
                    field="courses",
                    message="Must be a list of course names",
                    value=value
                ))

        for name in ("min_age", "max_age"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        min_age = params.get("min_age")
        max_age = params.get("max_age")
        if _is_int(min_age) and _is_int(max_age) and min_age >= max_age:
            errors.append(ValidationError(
                field="max_age",
                message="Must be greater than min_age",
                value=max_age
            ))

        return errors

    @staticmethod
    def validate_grade_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate grade parameters."""
        errors = []

        for name in ("min_number", "max_number"):
            if name in params and not _is_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be an integer",
                    value=params[name]
                ))

        if "bands" in params:
            value = params["bands"]
            valid = isinstance(value, (list, tuple)) and len(value) > 0
            if valid:
                for band in value:
                    if (not isinstance(band, (list, tuple)) or len(band) != 3
                            or not _is_int(band[0]) or not _is_int(band[1])
                            or band[0] > band[1]
                            or not isinstance(band[2], str) or not band[2]):
                        valid = False
                        break
            if not valid:
                errors.append(ValidationError(
                    field="bands",
                    message="Must be a non-empty list of [low, high, letter] with low <= high",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("query", "grades", "logging"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of settings",
                    value=config[section]
                ))
                return errors

        if "query" in config:
            errors.extend(ConfigValidator.validate_query_params(config["query"]))

        if "grades" in config:
            errors.extend(ConfigValidator.validate_grade_params(config["grades"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
