"""
Checksum and validation routines for Chilean RUT numbers.
"""

import re

from cl_rut_lib.core.constants import (
    CHECK_DIGIT_K,
    CHECK_DIGIT_MAX_WEIGHT,
    CHECK_DIGIT_MIN_WEIGHT,
)
from cl_rut_lib.utils.sanitiser import fully_sanitise_rut, sanitise_rut

# 4-12 characters: up to 3 leading digits, up to two ``.ddd`` groups,
# a hyphen and the check character.
RUT_REGEX = r"(?=.{4,12}\Z)[0-9]{1,3}(?:\.[0-9]{3}){0,2}-[0-9Kk]"

_RUT_REGEX = re.compile(RUT_REGEX)


def get_check_digit(correlative: str) -> str:
    """
    Compute the check digit of a RUT correlative.

    The algorithm (modulo 11):
    1. Keep only the digits of *correlative* and reverse them.
    2. Multiply each digit by a weight cycling through
       ``2, 3, 4, 5, 6, 7, 2, 3, ...``.
    3. Sum the results and compute ``11 - (sum % 11)``.
    4. Map ``11`` to ``"0"``, ``10`` to ``"K"``, any other value to its
       decimal representation.

    Separators are ignored, so ``"23.831.058"`` and ``"23831058"`` yield the
    same digit.  An empty correlative yields ``"0"``.

    Parameters
    ----------
    correlative: str
        The RUT without its check digit.

    Returns
    -------
    str
        A single character from ``0-9`` or ``K``.
    """
    weighted_sum = 0
    weight = CHECK_DIGIT_MIN_WEIGHT
    for digit in reversed(fully_sanitise_rut(correlative)):
        weighted_sum += int(digit) * weight
        weight = (
            CHECK_DIGIT_MIN_WEIGHT if weight == CHECK_DIGIT_MAX_WEIGHT else weight + 1
        )

    result = 11 - (weighted_sum % 11)
    if result == 11:
        return "0"
    if result <= 9:
        return str(result)
    return CHECK_DIGIT_K


def validate_rut(rut: str) -> bool:
    """
    Validate a formatted RUT string.

    The string must match the strict display format first
    (``"12.345.678-5"``, ``"50.323-1"``, ``"10-8"``): thousands grouped with
    dots and a hyphen before the check character.  Strings without the
    hyphen or with wrong grouping are rejected even when the checksum would
    be correct.  When the format matches, the supplied check digit is
    compared case-insensitively with :func:`get_check_digit`.

    Parameters
    ----------
    rut: str
        The RUT to validate.

    Returns
    -------
    bool
        ``True`` if the format and the checksum are both correct, otherwise
        ``False``.  The function never raises.
    """
    if not isinstance(rut, str) or not _RUT_REGEX.fullmatch(rut):
        return False

    sanitised = sanitise_rut(rut)
    correlative, check_digit = sanitised[:-1], sanitised[-1]
    return check_digit.upper() == get_check_digit(correlative).upper()
