"""Extraction of decimal digit runs from byte strings."""

import logging

from stackcalc.exceptions import OverflowError
from stackcalc.validators import BytesLike, validate_bytes

logger = logging.getLogger(__name__)

# Runs are small unsigned integers
DIGIT_RUN_MAX = 255

_ZERO = ord("0")
_NINE = ord("9")


def extract_digit_runs(data: BytesLike) -> list[int]:
    """
    Return every maximal run of ASCII digits in data, as integers.

    Non-digit bytes only delimit runs. Leading zeros are allowed.

    Example:
        >>> extract_digit_runs(b"x1=3,x2=5,x3=2")
        [1, 3, 2, 5, 3, 2]

    Args:
        data: bytes, bytearray or memoryview to scan

    Returns:
        The runs in encounter order, empty if data holds no digits

    Raises:
        InvalidInputError: If data is not bytes-like
        OverflowError: If a run exceeds DIGIT_RUN_MAX
    """
    runs: list[int] = []
    in_run = False
    value = 0

    for byte in validate_bytes(data):
        if _ZERO <= byte <= _NINE:
            digit = byte - _ZERO
            value = value * 10 + digit if in_run else digit
            in_run = True
            if value > DIGIT_RUN_MAX:
                raise OverflowError("digit run", value)
        elif in_run:
            runs.append(value)
            in_run = False
            value = 0

    if in_run:
        runs.append(value)

    logger.debug("extracted %d digit runs", len(runs))
    return runs
