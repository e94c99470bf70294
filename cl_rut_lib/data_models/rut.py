"""
Canonical representation of a RUT.
"""

from pydantic import BaseModel, ConfigDict

from cl_rut_lib.core.constants import CHECK_DIGIT_SEPARATOR
from cl_rut_lib.exceptions import RutFormatError
from cl_rut_lib.utils.sanitiser import sanitise_rut
from cl_rut_lib.utils.validators import get_check_digit


class RutParts(BaseModel):
    """
    A RUT split into its correlative and its check digit.

    Attributes
    ----------
    correlative : str
        Digits of the RUT body, without separators.
    check_digit : str
        The supplied check character, case preserved.
    """

    model_config = ConfigDict(frozen=True)

    correlative: str
    check_digit: str

    @property
    def check_digit_matches(self) -> bool:
        return self.check_digit.upper() == get_check_digit(self.correlative)

    def __str__(self) -> str:
        return f"{self.correlative}{CHECK_DIGIT_SEPARATOR}{self.check_digit}"


def split_rut(rut: str) -> RutParts:
    """
    Sanitise *rut* and split it into :class:`RutParts`.

    Raises
    ------
    RutFormatError
        If fewer than two characters survive sanitisation, or a ``K`` shows
        up anywhere but in the last position.
    """
    sanitised = sanitise_rut(rut)
    correlative, check_digit = sanitised[:-1], sanitised[-1:]
    if not correlative or not correlative.isdigit():
        raise RutFormatError(f"Cannot split {rut!r} into correlative and check digit")
    return RutParts(correlative=correlative, check_digit=check_digit)
