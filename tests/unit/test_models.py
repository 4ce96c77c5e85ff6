"""Tests for typed roster records."""

import pytest

from roster_app.collection import pluck
from roster_app.errors import MalformedRecordError, MissingFieldError, RecordError
from roster_app.models import Student, StudentField, build_roster, field_getter


class TestStudentFromMapping:
    """Test Student.from_mapping construction."""

    def test_valid_mapping(self, student_mapping):
        student = Student.from_mapping(student_mapping)

        assert student == Student(first="Han", last="Solo", age=35, course="Science")
        assert student.full_name == "Han Solo"

    def test_extra_keys_ignored(self, student_mapping):
        student_mapping["ship"] = "Millennium Falcon"
        assert Student.from_mapping(student_mapping).last == "Solo"

    def test_integer_age_accepted(self, student_mapping):
        student_mapping["age"] = 35
        assert Student.from_mapping(student_mapping).age == 35

    def test_missing_fields(self, student_mapping):
        """Should name every missing field."""
        del student_mapping["age"]
        del student_mapping["class"]

        with pytest.raises(MissingFieldError) as exc_info:
            Student.from_mapping(student_mapping)

        assert exc_info.value.missing_fields == ["age", "class"]
        assert exc_info.value.available_fields == ["first", "last"]
        assert isinstance(exc_info.value, RecordError)

    @pytest.mark.parametrize("raw_age", ["thirty", "-5", "3.5", "", -1, True])
    def test_malformed_age(self, student_mapping, raw_age):
        student_mapping["age"] = raw_age

        with pytest.raises(MalformedRecordError) as exc_info:
            Student.from_mapping(student_mapping)

        assert exc_info.value.field == "age"
        assert exc_info.value.raw_value == str(raw_age)
        assert exc_info.value.recoverable is True

    def test_frozen(self, student_mapping):
        student = Student.from_mapping(student_mapping)
        with pytest.raises(AttributeError):
            student.age = 40


class TestFieldAccess:
    """Test enum-keyed field access."""

    def test_get_returns_strings(self):
        student = Student(first="Mace", last="Windu", age=56, course="Science")

        assert student.get(StudentField.FIRST) == "Mace"
        assert student.get(StudentField.LAST) == "Windu"
        assert student.get(StudentField.AGE) == "56"
        assert student.get(StudentField.CLASS) == "Science"

    def test_as_mapping_round_trips(self, student_mapping):
        student = Student.from_mapping(student_mapping)
        assert student.as_mapping() == student_mapping

    def test_field_getter(self):
        student = Student(first="Mace", last="Windu", age=56, course="Science")
        assert field_getter(StudentField.CLASS)(student) == "Science"

    def test_get_accepts_source_names(self):
        """Plain strings should select the same field as the enum."""
        student = Student(first="Han", last="Solo", age=35, course="Science")

        assert student.get("first") == "Han"
        assert student.get("last") == "Solo"
        assert student.get("age") == "35"
        assert student.get("class") == "Science"

    def test_get_unknown_field(self):
        student = Student(first="Han", last="Solo", age=35, course="Science")
        with pytest.raises(ValueError):
            student.get("nope")

    def test_field_getter_with_string_key(self, small_roster):
        assert pluck(small_roster, field_getter("last")) == ["Kenobi", "Windu", "Solo", "Bacca"]

    def test_field_getter_unknown_field(self):
        """Should fail when the extractor is built, not when it is used."""
        with pytest.raises(ValueError):
            field_getter("ship")

    def test_field_values_match_source_keys(self):
        assert [field.value for field in StudentField] == ["first", "last", "age", "class"]


class TestBuildRoster:
    """Test build_roster function."""

    def test_preserves_order(self, student_mapping):
        other = {"first": "Rey", "last": "Rey", "age": "16", "class": "English"}
        roster = build_roster([student_mapping, other])

        assert isinstance(roster, tuple)
        assert [s.first for s in roster] == ["Han", "Rey"]

    def test_empty(self):
        assert build_roster([]) == ()

    def test_error_records_position(self, student_mapping):
        """Should propagate the first failure with its position in context."""
        bad = {"first": "Rey", "last": "Rey", "age": "old", "class": "English"}

        with pytest.raises(MalformedRecordError) as exc_info:
            build_roster([student_mapping, bad])

        assert exc_info.value.context["position"] == 1

    def test_sample_roster(self, roster):
        assert len(roster) == 17
        assert roster[0].full_name == "Obi-Wan Kenobi"
        assert roster[-1].full_name == "Rey Rey"
