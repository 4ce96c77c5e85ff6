"""Default configuration parameters for roster queries and grading."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LoggingParams:
    """Logging setup parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class QueryParams:
    """Roster query parameters used by the course/age query."""
    courses: tuple[str, ...] = ("Math", "Science")
    min_age: int = 25                  # Exclusive lower bound
    max_age: int = 80                  # Exclusive upper bound

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QueryParams":
        """Build query params from a merged config section."""
        defaults = cls()
        return cls(
            courses=tuple(data.get("courses", defaults.courses)),
            min_age=data.get("min_age", defaults.min_age),
            max_age=data.get("max_age", defaults.max_age),
        )


def _default_bands() -> tuple[tuple[int, int, str], ...]:
    return (
        (90, 100, "A"),
        (80, 89, "B"),
        (70, 79, "C"),
        (60, 69, "D"),
        (0, 59, "F"),
    )


@dataclass(frozen=True)
class GradeParams:
    """Grade validation parameters."""
    min_number: int = 0
    max_number: int = 100
    # Inclusive (low, high, letter) ranges, checked in order
    bands: tuple[tuple[int, int, str], ...] = field(default_factory=_default_bands)

    @property
    def letters(self) -> tuple[str, ...]:
        """Letters that appear in any band."""
        return tuple(letter for _low, _high, letter in self.bands)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GradeParams":
        """Build grade params from a merged config section."""
        defaults = cls()
        bands = data.get("bands", defaults.bands)
        return cls(
            min_number=data.get("min_number", defaults.min_number),
            max_number=data.get("max_number", defaults.max_number),
            bands=tuple((int(low), int(high), str(letter)) for low, high, letter in bands),
        )


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    query: QueryParams
    grades: GradeParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        query=QueryParams(),
        grades=GradeParams(),
    )
