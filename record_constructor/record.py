"""The ``Record`` value object and its validating constructor.

``construct`` is the only supported way to build a ``Record`` from user
input.  It checks the fields in a fixed order and raises ``RecordError``
on the first failure, so the message the user sees is always the most
fundamental problem with their input.
"""

import logging
import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from record_constructor.errors import ErrorKind, RecordError

logger: logging.Logger = logging.getLogger(__name__)

AGE_MAX: Final[int] = 120

# Ages are stored as an unsigned 8-bit quantity.
UINT8_MAX: Final[int] = 255

_INT64_MIN: Final[int] = -(2**63)
_INT64_MAX: Final[int] = 2**63 - 1

# int64 holds at most 19 significant decimal digits.
_INT64_DIGITS: Final[int] = 19

_DECIMAL_RE = re.compile(r"([+-]?)0*([0-9]+)")


class Record(BaseModel):
    """A validated name/age pair.

    Instances are immutable.  Building one directly with an empty name or
    an age outside ``[1, AGE_MAX]`` raises ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Non-empty display name.")
    age: int = Field(..., ge=1, le=AGE_MAX, description="Age in whole years.")

    def __str__(self) -> str:
        return f"name={self.name!r}, age={self.age}"


def _parse_age(age_input: str) -> int:
    """Parse ``age_input`` as a signed 64-bit base-10 integer.

    Accepts an optional leading sign followed by ASCII digits and nothing
    else: no surrounding whitespace and no underscores.  Leading zeros
    are ignored, so only the significant digits count towards the width.
    """
    match = _DECIMAL_RE.fullmatch(age_input)
    if match is None:
        raise RecordError(ErrorKind.PARSE_ERROR, f'parsing "{age_input}": invalid syntax')

    sign, digits = match.groups()
    if len(digits) > _INT64_DIGITS:
        raise RecordError(ErrorKind.PARSE_ERROR, f'parsing "{age_input}": value out of range')

    age = int(sign + digits, 10)
    if not (_INT64_MIN <= age <= _INT64_MAX):
        raise RecordError(ErrorKind.PARSE_ERROR, f'parsing "{age_input}": value out of range')
    return age


def construct(name: str, age_input: str) -> Record:
    """Validate ``name`` and ``age_input`` and build a ``Record``.

    Args:
        name: Any non-empty string.  Whitespace-only names are accepted;
            only the empty string counts as blank.
        age_input: Decimal text representation of the age, e.g. ``"42"``.

    Returns:
        A ``Record`` whose age lies in ``[1, AGE_MAX]``.

    Raises:
        RecordError: ``INVALID_INPUT`` for a blank field or an out-of-range
            age, ``PARSE_ERROR`` when ``age_input`` is not an integer.
    """
    # Log input lengths, not raw values.
    logger.debug(
        "construct called with %d-char name, %d-char age_input",
        len(name),
        len(age_input),
    )

    if name == "":
        raise RecordError(ErrorKind.INVALID_INPUT, "need non blank name")

    if age_input == "":
        raise RecordError(ErrorKind.INVALID_INPUT, "need non blank age")

    age = _parse_age(age_input)

    # Hard limit
    if age <= 0 or age > UINT8_MAX:
        raise RecordError(ErrorKind.INVALID_INPUT, "invalid age")

    # Soft limit
    if age > AGE_MAX:
        raise RecordError(ErrorKind.INVALID_INPUT, "nobody's that old!")

    record = Record(name=name, age=age)
    logger.debug("construct succeeded with age=%d", record.age)
    return record
