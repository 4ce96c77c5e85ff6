"""
Roster queries composed from the collection utilities.
"""

from typing import Callable, Iterable, Optional, Sequence

from roster_app.collection import filter_, pluck
from roster_app.config.defaults import QueryParams
from roster_app.logging import get_collection_logger
from roster_app.models import Student, StudentField, field_getter


def course_age_predicate(
    courses: Iterable[str],
    min_age: int,
    max_age: int,
) -> Callable[[Student], bool]:
    """
    Predicate matching students in one of courses with min_age < age < max_age.

    Both age bounds are exclusive.
    """
    wanted = frozenset(courses)

    def matches(student: Student) -> bool:
        return student.course in wanted and min_age < student.age < max_age

    return matches


def last_names_in_courses(
    roster: Sequence[Student],
    params: Optional[QueryParams] = None,
) -> list[str]:
    """
    Last names of students matching the course/age query, in roster order.

    Args:
        roster: Students to search
        params: Query bounds, defaults to QueryParams()

    Returns:
        Last names of the matching students
    """
    params = params or QueryParams()
    predicate = course_age_predicate(params.courses, params.min_age, params.max_age)

    matched = filter_(roster, predicate)
    names = pluck(matched, field_getter(StudentField.LAST))

    get_collection_logger(__name__).debug(
        "Course/age query evaluated",
        courses=list(params.courses),
        min_age=params.min_age,
        max_age=params.max_age,
        roster_size=len(roster),
        matched=len(matched),
    )
    return names
