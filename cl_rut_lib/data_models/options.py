"""
Option models for the RUT generator.

These lightweight Pydantic models describe the formatting options accepted by
:func:`~cl_rut_lib.generator.generate_rut` and
:func:`~cl_rut_lib.generator.generate_many_ruts`.  Plain dictionaries are
accepted by the generator as well; they are validated through these models
and unknown keys are ignored.
"""

from typing import Optional

from pydantic import BaseModel, NonNegativeInt


class GenerateRutOptions(BaseModel):
    """
    Formatting options of a single generated RUT.

    Attributes
    ----------
    dots : bool, Default True
        Whether the correlative is grouped with dots as thousands separator.
    hyphen : bool, Default True
        Whether a hyphen is placed between the correlative and the check
        digit.
    """

    dots: bool = True
    hyphen: bool = True


class GenerateManyRutOptions(GenerateRutOptions):
    """
    Options of a batch of generated RUTs.

    Attributes
    ----------
    count : Optional[int], Default None
        Number of RUTs to generate.  When ``None`` the generator falls back
        to ``DEFAULT_GENERATE_COUNT``, unless no option was set at all.
    """

    count: Optional[NonNegativeInt] = None
