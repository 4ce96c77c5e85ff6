"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from roster_app.data.sample import sample_roster
from roster_app.models import Student


@pytest.fixture
def roster() -> tuple[Student, ...]:
    """The bundled seventeen-student roster."""
    return sample_roster()


@pytest.fixture
def small_roster() -> List[Student]:
    """Four students from the course/age query scenario."""
    return [
        Student(first="Obi-Wan", last="Kenobi", age=55, course="Math"),
        Student(first="Mace", last="Windu", age=56, course="Science"),
        Student(first="Han", last="Solo", age=35, course="Science"),
        Student(first="Chew", last="Bacca", age=33, course="Science"),
    ]


@pytest.fixture
def student_mapping() -> Dict[str, Any]:
    """A single source-shaped student record."""
    return {"first": "Han", "last": "Solo", "age": "35", "class": "Science"}
