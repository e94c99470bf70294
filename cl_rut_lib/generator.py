"""
Random generation of valid RUT strings.

The generator draws a correlative uniformly from
``[GENERATOR_MIN_CORRELATIVE, GENERATOR_MAX_CORRELATIVE)`` (six to eight
digits) and appends its check digit.  Randomness comes from the standard
:mod:`random` module; pass a seeded :class:`random.Random` as ``rng`` to make
the output reproducible.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Union

from cl_rut_lib.core.constants import (
    CHECK_DIGIT_SEPARATOR,
    DEFAULT_GENERATE_COUNT,
    GENERATOR_MAX_CORRELATIVE,
    GENERATOR_MIN_CORRELATIVE,
)
from cl_rut_lib.data_models.options import GenerateManyRutOptions, GenerateRutOptions
from cl_rut_lib.utils.formatter import group_thousands
from cl_rut_lib.utils.validators import get_check_digit

logger = logging.getLogger(__name__)


def generate_rut(
    options: Optional[Union[Dict[str, Any], GenerateRutOptions]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return a random, valid RUT.

    Parameters
    ----------
    options : Dict[str, Any] | GenerateRutOptions | None
        Formatting options (``dots``, ``hyphen``).  Both default to ``True``,
        which produces strings such as ``"12.345.678-5"``.
    rng : random.Random | None
        Source of randomness, the module level :mod:`random` when ``None``.

    Returns
    -------
    str
        The generated RUT.
    """
    if options is None:
        options = GenerateRutOptions()
    elif isinstance(options, dict):
        options = GenerateRutOptions.model_validate(options)

    correlative = (rng or random).randrange(
        GENERATOR_MIN_CORRELATIVE, GENERATOR_MAX_CORRELATIVE
    )
    body = group_thousands(correlative) if options.dots else str(correlative)
    separator = CHECK_DIGIT_SEPARATOR if options.hyphen else ""
    return body + separator + get_check_digit(str(correlative))


def generate_many_ruts(
    options: Optional[Union[Dict[str, Any], GenerateRutOptions]] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Return a list of random, valid RUTs.

    Without ``options`` the list holds ``DEFAULT_GENERATE_COUNT`` dotted and
    hyphenated RUTs.  An options object in which no recognised option is set
    (``{}``, ``{"unknown": 1}``, ``GenerateManyRutOptions()``) yields an empty
    list.  Otherwise a missing ``count`` falls back to
    ``DEFAULT_GENERATE_COUNT``.

    Parameters
    ----------
    options : Dict[str, Any] | GenerateRutOptions | None
        ``count``, ``dots`` and ``hyphen``.  A plain :class:`GenerateRutOptions`
        is accepted and treated as having no ``count``.
    rng : random.Random | None
        Source of randomness shared by every generated RUT.

    Returns
    -------
    List[str]
        The generated RUTs.
    """
    if options is None:
        options = GenerateManyRutOptions(count=DEFAULT_GENERATE_COUNT)
    elif isinstance(options, dict):
        options = GenerateManyRutOptions.model_validate(options)
    elif not isinstance(options, GenerateManyRutOptions):
        options = GenerateManyRutOptions.model_validate(
            options.model_dump(exclude_unset=True)
        )

    if not options.model_fields_set:
        logger.debug("No generation option set, returning no RUTs")
        return []

    count = DEFAULT_GENERATE_COUNT if options.count is None else options.count
    logger.debug(
        "Generating %d RUTs (dots=%s, hyphen=%s)", count, options.dots, options.hyphen
    )
    return [generate_rut(options, rng=rng) for _ in range(count)]
