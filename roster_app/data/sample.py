"""Sample roster of seventeen students, in source mapping form."""

from typing import Any

from roster_app.models import Student, build_roster

STUDENTS: tuple[dict[str, Any], ...] = (
    {"first": "Obi-Wan", "last": "Kenobi",     "age": "55", "class": "Math"},
    {"first": "Darth",   "last": "Vader",      "age": "76", "class": "English"},
    {"first": "Anakin",  "last": "Skywalker",  "age": "17", "class": "History"},
    {"first": "Darth",   "last": "Sidious",    "age": "88", "class": "Science"},
    {"first": "Padme",   "last": "Amidala",    "age": "25", "class": "Math"},
    {"first": "Mace",    "last": "Windu",      "age": "56", "class": "Science"},
    {"first": "Count",   "last": "Dooku",      "age": "67", "class": "History"},
    {"first": "Luke",    "last": "Skywalker",  "age": "21", "class": "Math"},
    {"first": "Han",     "last": "Solo",       "age": "35", "class": "Science"},
    {"first": "Leia",    "last": "Organa",     "age": "21", "class": "English"},
    {"first": "Chew",    "last": "Bacca",      "age": "33", "class": "Science"},
    {"first": "Boba",    "last": "Fett",       "age": "32", "class": "History"},
    {"first": "Lando",   "last": "Calrissian", "age": "55", "class": "English"},
    {"first": "Kylo",    "last": "Ren",        "age": "21", "class": "Math"},
    {"first": "Poe",     "last": "Dameron",    "age": "25", "class": "History"},
    {"first": "Finn",    "last": "FN-2187",    "age": "23", "class": "Science"},
    {"first": "Rey",     "last": "Rey",        "age": "16", "class": "English"},
)


def sample_roster() -> tuple[Student, ...]:
    """Typed copy of STUDENTS, in order."""
    return build_roster(STUDENTS)
