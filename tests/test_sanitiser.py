import pytest

from cl_rut_lib import sanitise_rut, fully_sanitise_rut


@pytest.mark.parametrize(
    "rut,expected",
    [
        ("23.831.058-K", "23831058K"),
        ("23.964.368-K", "23964368K"),
        ("13.750.460-k", "13750460k"),
        ("17.907.812-0", "179078120"),
        ("1.108.244-0", "11082440"),
        ("238.620-8", "2386208"),
        ("12.443-3", "124433"),
        ("9.765.432-1", "97654321"),
        ("sound", ""),
        ("soundk", "k"),
        ("soundK", "K"),
        (" 12 345 678 k ", "12345678k"),
        ("", ""),
    ],
)
def test_sanitise_rut_keeps_digits_and_k(rut: str, expected: str):
    assert sanitise_rut(rut) == expected


@pytest.mark.parametrize(
    "rut,expected",
    [
        ("23.831.058-K", "23831058"),
        ("13.750.460-k", "13750460"),
        ("17.907.812-0", "179078120"),
        ("238.620-8", "2386208"),
        ("12.345.678-9", "123456789"),
        ("sound", ""),
        ("soundk", ""),
        ("soundK", ""),
    ],
)
def test_fully_sanitise_rut_keeps_only_digits(rut: str, expected: str):
    assert fully_sanitise_rut(rut) == expected


def test_sanitise_rut_accepts_non_string_input():
    assert sanitise_rut(12345) == "12345"
    assert fully_sanitise_rut(12345) == "12345"


def test_sanitise_rut_drops_non_ascii_digits():
    assert sanitise_rut("١٢3-4") == "34"


@pytest.mark.parametrize("raw", ["23.831.058-K", "a1b2c3", "k-k-k", ""])
def test_fully_sanitise_rut_is_idempotent(raw: str):
    once = fully_sanitise_rut(raw)
    assert fully_sanitise_rut(once) == once
    assert fully_sanitise_rut(sanitise_rut(raw)) == once
