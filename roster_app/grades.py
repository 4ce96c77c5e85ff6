"""
Grade construction and validation.

A grade pairs a number with a letter. The letter must match the band the
number falls in, e.g. 94 must be an "A".
"""

from dataclasses import dataclass
from typing import Optional

from roster_app.config.defaults import GradeParams
from roster_app.errors import BadLetterError, BadNumberError, GradeError, MissingLetterError
from roster_app.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Grade:
    """A validated grade."""
    number: int
    letter: str

    def __str__(self) -> str:
        return f"{self.number} or a {self.letter}"


def expected_letter(number: int, params: Optional[GradeParams] = None) -> Optional[str]:
    """Letter of the first band containing number, or None if no band does."""
    params = params or GradeParams()
    for low, high, letter in params.bands:
        if low <= number <= high:
            return letter
    return None


def create_grade(number: int, letter: str, params: Optional[GradeParams] = None) -> Grade:
    """
    Build a Grade, checking the number first, then the letter.

    Raises:
        BadNumberError: If number is outside [min_number, max_number]
        MissingLetterError: If letter is empty
        BadLetterError: If letter does not match the band for number
    """
    params = params or GradeParams()

    if not params.min_number <= number <= params.max_number:
        raise BadNumberError(
            f"Grade number {number} outside {params.min_number}-{params.max_number}",
            number=number,
            min_number=params.min_number,
            max_number=params.max_number,
        )

    if not letter:
        raise MissingLetterError("Grade letter is missing", context={"number": number})

    # A number in range but between bands has no expected letter; any letter is accepted
    should_be = expected_letter(number, params)
    if should_be is not None and letter != should_be:
        raise BadLetterError(
            f"Grade letter {letter!r} should be {should_be!r} for {number}",
            you_passed=letter,
            should_be=should_be,
            context={"number": number},
        )

    return Grade(number=number, letter=letter)


def grade_message(number: int, letter: str, params: Optional[GradeParams] = None) -> str:
    """User-facing message for a grade attempt; never raises GradeError."""
    try:
        grade = create_grade(number, letter, params)
    except BadLetterError as e:
        message = f"You passed a letter of {e.you_passed}, but it should be {e.should_be}"
    except MissingLetterError:
        message = "You didn't pass in a letter"
    except BadNumberError:
        message = "You passed in a bad number"
    except GradeError as e:
        message = str(e)
    else:
        return f"Your grade is {grade}"

    logger.warning("Grade rejected", number=number, letter=letter, reason=message)
    return message
