"""
Typed roster records.

A Student is the immutable, typed form of a roster mapping such as
{"first": "Han", "last": "Solo", "age": "35", "class": "Science"}.
Field access goes through the StudentField enum rather than raw strings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from roster_app.errors import MalformedRecordError, MissingFieldError
from roster_app.logging import get_logger

logger = get_logger(__name__)


class StudentField(str, Enum):
    """Field names as they appear in source roster mappings."""
    FIRST = "first"
    LAST = "last"
    AGE = "age"
    CLASS = "class"


@dataclass(frozen=True)
class Student:
    """One roster entry. Equality is field-wise."""
    first: str
    last: str
    age: int
    course: str        # "class" in source mappings

    def get(self, field: Union[StudentField, str]) -> str:
        """
        Field value as a string, the way it appears in source mappings.

        Accepts a StudentField or its source name, e.g. "last".

        Raises:
            ValueError: If field does not name a student field
        """
        field = StudentField(field)
        values = {
            StudentField.FIRST: self.first,
            StudentField.LAST: self.last,
            StudentField.AGE: str(self.age),
            StudentField.CLASS: self.course,
        }
        return values[field]

    def as_mapping(self) -> dict[str, str]:
        """Source-shaped mapping of field name to string value."""
        return {field.value: self.get(field) for field in StudentField}

    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Student":
        """
        Build a Student from a source-shaped mapping.

        Extra keys are ignored.

        Raises:
            MissingFieldError: If any of first/last/age/class is absent
            MalformedRecordError: If age is not a non-negative whole number
        """
        missing = [field.value for field in StudentField if field.value not in mapping]
        if missing:
            raise MissingFieldError(
                f"Record is missing fields: {', '.join(missing)}",
                missing_fields=missing,
                available_fields=sorted(str(key) for key in mapping),
            )

        raw_age = mapping[StudentField.AGE.value]
        age = _parse_age(raw_age)
        if age is None:
            raise MalformedRecordError(
                f"Age {raw_age!r} is not a non-negative whole number",
                field=StudentField.AGE.value,
                raw_value=str(raw_age),
                expected_format="non-negative integer",
            )

        return cls(
            first=str(mapping[StudentField.FIRST.value]),
            last=str(mapping[StudentField.LAST.value]),
            age=age,
            course=str(mapping[StudentField.CLASS.value]),
        )


def _parse_age(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def field_getter(field: Union[StudentField, str]) -> Callable[[Student], str]:
    """Extractor returning one field of a Student as a string."""
    field = StudentField(field)

    def extract(student: Student) -> str:
        return student.get(field)

    return extract


def build_roster(mappings: Iterable[Mapping[str, Any]]) -> tuple[Student, ...]:
    """
    Build an ordered, immutable roster from source mappings.

    The first invalid mapping aborts construction; its error propagates.
    """
    students = []
    for position, mapping in enumerate(mappings):
        try:
            students.append(Student.from_mapping(mapping))
        except (MissingFieldError, MalformedRecordError) as e:
            logger.warning("Rejected roster record", position=position, error=str(e))
            e.context.setdefault("position", position)
            raise
    return tuple(students)
