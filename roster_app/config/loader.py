"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, GradeParams, QueryParams, get_default_config
from .validation import ConfigValidationError, ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load settings overrides from settings.yaml, if present."""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. settings.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def query_params(self, overrides: Optional[dict[str, Any]] = None) -> QueryParams:
        """
        Typed query parameters after merging.

        Raises:
            ConfigValidationError: If the merged query section is invalid
        """
        section = self._validated_section("query", overrides)
        return QueryParams.from_dict(section)

    def grade_params(self, overrides: Optional[dict[str, Any]] = None) -> GradeParams:
        """
        Typed grade parameters after merging.

        Raises:
            ConfigValidationError: If the merged grades section is invalid
        """
        section = self._validated_section("grades", overrides)
        return GradeParams.from_dict(section)

    def _validated_section(self, name: str, overrides: Optional[dict[str, Any]]) -> dict[str, Any]:
        config = self.merge_config(overrides)
        errors = ConfigValidator.validate_config({name: config.get(name, {})})
        if errors:
            raise ConfigValidationError(f"Invalid {name} configuration", errors=errors)
        return config.get(name, {})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            # An empty YAML section ("query:") parses as None and keeps the defaults
            if value is None and isinstance(result.get(key), dict):
                continue
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
