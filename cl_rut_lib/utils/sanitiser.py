"""
Sanitisation helpers for RUT strings.

Both functions are plain character-class filters: they never validate and
never fail.
"""

import re

_NOT_RUT_CHAR_REGEX = re.compile(r"[^0-9Kk]")
_NOT_DIGIT_REGEX = re.compile(r"[^0-9]")


def sanitise_rut(rut: str) -> str:
    """
    Leave only ASCII digits and the ``K``/``k`` check character.

    Order and case of the surviving characters are preserved, e.g.
    ``"23.831.058-K"`` becomes ``"23831058K"`` and ``"soundk"`` becomes
    ``"k"``.
    """
    return _NOT_RUT_CHAR_REGEX.sub("", str(rut))


def fully_sanitise_rut(rut: str) -> str:
    """
    Leave only ASCII digits (a trailing ``K``/``k`` is dropped as well).

    >>> fully_sanitise_rut("23.831.058-K")
    '23831058'
    """
    return _NOT_DIGIT_REGEX.sub("", str(rut))
