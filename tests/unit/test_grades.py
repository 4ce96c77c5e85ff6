"""Tests for grade construction and validation."""

import pytest

from roster_app.config.defaults import GradeParams
from roster_app.errors import BadLetterError, BadNumberError, MissingLetterError
from roster_app.grades import Grade, create_grade, expected_letter, grade_message


class TestExpectedLetter:
    """Test band lookup."""

    @pytest.mark.parametrize("number,letter", [
        (100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"),
        (70, "C"), (69, "D"), (60, "D"), (59, "F"), (0, "F"),
    ])
    def test_band_edges(self, number, letter):
        assert expected_letter(number) == letter

    def test_outside_every_band(self):
        assert expected_letter(101) is None


class TestCreateGrade:
    """Test create_grade guard order and results."""

    def test_valid_grade(self):
        grade = create_grade(93, "A")
        assert grade == Grade(number=93, letter="A")
        assert str(grade) == "93 or a A"

    def test_bad_number(self):
        with pytest.raises(BadNumberError) as exc_info:
            create_grade(101, "A")
        assert exc_info.value.number == 101
        assert exc_info.value.max_number == 100

    def test_missing_letter(self):
        with pytest.raises(MissingLetterError):
            create_grade(100, "")

    def test_bad_letter(self):
        with pytest.raises(BadLetterError) as exc_info:
            create_grade(93, "B")
        assert exc_info.value.you_passed == "B"
        assert exc_info.value.should_be == "A"

    def test_number_checked_before_letter(self):
        """An out-of-range number wins over an empty letter."""
        with pytest.raises(BadNumberError):
            create_grade(-1, "")

    def test_number_between_bands_accepts_any_letter(self):
        """In range but covered by no band: the letter is not checked."""
        params = GradeParams(max_number=110)
        assert create_grade(105, "Z", params) == Grade(number=105, letter="Z")

    def test_custom_bands(self):
        params = GradeParams(bands=((50, 100, "P"), (0, 49, "F")))
        assert create_grade(50, "P", params).letter == "P"
        with pytest.raises(BadLetterError):
            create_grade(49, "P", params)


class TestGradeMessage:
    """Test grade_message, which reports rather than raises."""

    def test_success(self):
        assert grade_message(94, "A") == "Your grade is 94 or a A"

    def test_bad_number(self):
        assert grade_message(101, "A") == "You passed in a bad number"

    def test_missing_letter(self):
        assert grade_message(100, "") == "You didn't pass in a letter"

    def test_bad_letter(self):
        assert grade_message(94, "F") == "You passed a letter of F, but it should be A"
