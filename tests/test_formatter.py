import pytest

from cl_rut_lib import RutFormatError, format_rut, group_thousands


@pytest.mark.parametrize(
    "rut,expected",
    [
        ("23831058k", "23.831.058-k"),
        ("23964368k", "23.964.368-k"),
        ("13750460K", "13.750.460-K"),
        ("179078120", "17.907.812-0"),
        ("11082440", "1.108.244-0"),
        ("2386208", "238.620-8"),
        ("123856", "12.385-6"),
        ("108", "10-8"),
        ("0108", "10-8"),
        ("8", "0-8"),
    ],
)
def test_format_rut(rut: str, expected: str):
    assert format_rut(rut) == expected


@pytest.mark.parametrize(
    "number,expected",
    [(0, "0"), (999, "999"), (1000, "1.000"), (1108244, "1.108.244")],
)
def test_group_thousands(number: int, expected: str):
    assert group_thousands(number) == expected


def test_group_thousands_custom_separator():
    assert group_thousands(29099999, separator=" ") == "29 099 999"


@pytest.mark.parametrize("rut", ["", "ab-8", "12.345-6", "x-1"])
def test_format_rut_rejects_non_numeric_correlative(rut: str):
    with pytest.raises(RutFormatError):
        format_rut(rut)


def test_rut_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_rut("x1")
