"""
Grade validation error classifications.

Each case carries the data needed to tell the caller what to fix.
"""

from typing import Optional, Dict, Any


class GradeError(Exception):
    """Base class for invalid grade number/letter combinations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class BadNumberError(GradeError):
    """Grade number outside the allowed range."""

    def __init__(self, message: str, number: Optional[int] = None,
                 min_number: Optional[int] = None,
                 max_number: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.number = number
        self.min_number = min_number
        self.max_number = max_number


class MissingLetterError(GradeError):
    """Grade letter is empty."""


class BadLetterError(GradeError):
    """Grade letter does not match the band for the number."""

    def __init__(self, message: str, you_passed: str = "", should_be: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.you_passed = you_passed
        self.should_be = should_be
