import logging

import pytest
from pydantic import ValidationError

from cl_rut_lib import RutFormatError, RutParts, split_rut
from cl_rut_lib.utils.logger import prepare_logger


def test_split_rut_preserves_check_digit_case():
    parts = split_rut("23.831.058-k")
    assert parts == RutParts(correlative="23831058", check_digit="k")
    assert parts.check_digit_matches
    assert str(parts) == "23831058-k"


def test_split_rut_detects_wrong_check_digit():
    assert not split_rut("11.553.392-3").check_digit_matches


@pytest.mark.parametrize("rut", ["", "5", "random", "K1"])
def test_split_rut_rejects_unsplittable(rut: str):
    with pytest.raises(RutFormatError):
        split_rut(rut)


def test_rut_parts_is_immutable():
    parts = split_rut("10-8")
    with pytest.raises(ValidationError):
        parts.check_digit = "9"


def test_prepare_logger_uses_given_level():
    logger = prepare_logger("cl_rut_lib.tests.logger", level="debug")
    assert logger.level == logging.DEBUG
    assert logger.handlers
