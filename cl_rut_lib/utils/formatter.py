"""
Presentation helpers turning sanitised RUTs into the Chilean display form.

``format_rut`` does not validate; callers that need a guarantee of validity
should run :func:`~cl_rut_lib.utils.validators.validate_rut` on the result.
"""

import logging

from cl_rut_lib.core.constants import (
    CHECK_DIGIT_SEPARATOR,
    GROUP_SEPARATOR,
    GROUP_SIZE,
)
from cl_rut_lib.exceptions import RutFormatError

logger = logging.getLogger(__name__)


def group_thousands(number: int, separator: str = GROUP_SEPARATOR) -> str:
    """
    Render a non-negative integer with *separator* between groups of three
    digits, counted from the right (``1108244`` -> ``"1.108.244"``).
    """
    digits = str(number)
    groups = []
    while digits:
        groups.append(digits[-GROUP_SIZE:])
        digits = digits[:-GROUP_SIZE]
    return separator.join(reversed(groups))


def format_rut(rut: str) -> str:
    """
    Format a sanitised RUT as ``<grouped correlative>-<check digit>``.

    The last character of *rut* is taken as the check digit and copied
    unchanged (``"23831058k"`` -> ``"23.831.058-k"``).  Everything before it
    is read as a number, so leading zeros disappear.

    Parameters
    ----------
    rut: str
        Digits of the correlative immediately followed by the check digit,
        e.g. the output of :func:`~cl_rut_lib.utils.sanitiser.sanitise_rut`.

    Returns
    -------
    str
        The formatted RUT.

    Raises
    ------
    RutFormatError
        If *rut* is empty or the correlative part is not made of ASCII
        digits.  An empty correlative (``"8"``) is read as ``0``.
    """
    if not rut:
        raise RutFormatError("Cannot format an empty RUT")

    correlative, check_digit = rut[:-1], rut[-1:]
    if correlative and not (correlative.isascii() and correlative.isdigit()):
        logger.debug("Cannot format %r: correlative is not numeric", rut)
        raise RutFormatError(f"Cannot format {rut!r}: correlative is not numeric")

    return (
        group_thousands(int(correlative or 0))
        + CHECK_DIGIT_SEPARATOR
        + check_digit
    )
