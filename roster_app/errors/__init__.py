"""
Error classification for roster_app.

Errors are raised only at construction seams (records, grades); the
collection utilities return results such as NOT_FOUND instead of raising.
"""

from .record_errors import (
    RecordError,
    MissingFieldError,
    MalformedRecordError,
)
from .grade_errors import (
    GradeError,
    BadNumberError,
    MissingLetterError,
    BadLetterError,
)

__all__ = [
    # Record construction
    "RecordError",
    "MissingFieldError",
    "MalformedRecordError",
    # Grade validation
    "GradeError",
    "BadNumberError",
    "MissingLetterError",
    "BadLetterError",
]
