#!/usr/bin/env python3
"""
Roster Query Example - roster_app collection utilities

This script answers a few questions about the bundled sample roster using
each/all_/any_/contains/index_of/filter_/reject/pluck. It shows how to:
- Build a typed roster from source mappings
- Compose predicates and extractors as closures
- Run the Math/Science, 25 < age < 80 last-name query

Run: python examples/roster_query_demo.py
"""

from roster_app.collection import (
    NOT_FOUND, all_, any_, contains, each, filter_, index_of, pluck, reject, sort_by
)
from roster_app.config.loader import ConfigLoader
from roster_app.data.sample import sample_roster
from roster_app.logging import configure_logging
from roster_app.models import Student, StudentField, field_getter
from roster_app.query import last_names_in_courses


def main() -> None:
    """Print answers to the sample roster questions."""
    configure_logging(level="INFO")
    roster = sample_roster()

    print("📋 Roster:")
    each(roster, lambda student, index: print(f"  {index:2d}. {student.full_name} ({student.age}, {student.course})"))

    print("\n❓ Questions:")
    print(f"  Everyone at least 16?     {all_(roster, lambda s: s.age >= 16)}")
    print(f"  Anyone older than 80?     {any_(roster, lambda s: s.age > 80)}")

    han = Student(first="Han", last="Solo", age=35, course="Science")
    print(f"  Han Solo enrolled?        {contains(roster, han)} (index {index_of(roster, han)})")

    jar_jar = Student(first="Jar Jar", last="Binks", age=40, course="History")
    position = index_of(roster, jar_jar)
    print(f"  Jar Jar Binks enrolled?   {'no' if position == NOT_FOUND else position}")

    science = filter_(roster, lambda s: s.course == "Science")
    print(f"  Science students:         {pluck(science, field_getter(StudentField.FIRST))}")

    adults = reject(roster, lambda s: s.age < 18)
    print(f"  Adults:                   {len(adults)} of {len(roster)}")

    youngest = sort_by(roster, lambda s: s.age)[:3]
    print(f"  Three youngest:           {[s.full_name for s in youngest]}")

    params = ConfigLoader.create().query_params()
    print("\n🎯 Last names of Math and Science students where 25 < age < 80:")
    print(f"  {last_names_in_courses(roster, params)}")


if __name__ == "__main__":
    main()
