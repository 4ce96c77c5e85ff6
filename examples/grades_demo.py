#!/usr/bin/env python3
"""
Grades Example - roster_app grade validation

Shows create_grade raising a typed error for each bad input and
grade_message turning those errors into user-facing text.

Run: python examples/grades_demo.py
"""

from roster_app.errors import BadLetterError, BadNumberError, MissingLetterError
from roster_app.grades import create_grade, grade_message
from roster_app.logging import configure_logging


def main() -> None:
    """Validate a handful of grade attempts."""
    configure_logging(level="ERROR")

    print("📝 grade_message:")
    for number, letter in [(94, "A"), (101, "A"), (55, "E"), (94, "F"), (100, "")]:
        print(f"  ({number}, {letter!r}) -> {grade_message(number, letter)}")

    print("\n🧯 create_grade with explicit handling:")
    for number, letter in [(93, "B"), (100, ""), (101, "A"), (100, "A")]:
        try:
            grade = create_grade(number, letter)
        except BadLetterError as e:
            print(f"  You passed a letter of {e.you_passed}, but it should be {e.should_be}")
        except MissingLetterError:
            print("  You didn't pass in a letter")
        except BadNumberError as e:
            print(f"  You passed in a bad number ({e.number})")
        else:
            print(f"  My grade is {grade}")


if __name__ == "__main__":
    main()
