"""
Record construction error classifications.

Raised only while turning caller-supplied mappings into typed records.
The collection utilities themselves never raise these.
"""

from typing import Optional, Dict, Any


class RecordError(Exception):
    """Base class for records that cannot be constructed from their input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingFieldError(RecordError):
    """One or more required fields are absent from the source mapping."""

    def __init__(self, message: str, missing_fields: Optional[list] = None,
                 available_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_fields = missing_fields or []
        self.available_fields = available_fields or []


class MalformedRecordError(RecordError):
    """A field is present but its value is in the wrong format."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value
        self.expected_format = expected_format
