import pytest

from fintra.utils import helpers


@pytest.mark.parametrize("value,expected", [("8080", 8080), ("3000.0", 3000), ("", 7), (None, 7), ("nope", 7)])
def test_parse_int(value, expected):
    assert helpers.parse_int(value, 7) == expected


def test_parse_float_falls_back():
    assert helpers.parse_float("2.5") == 2.5
    assert helpers.parse_float("x", 1.0) == 1.0


def test_parse_csv_trims_and_drops_blanks():
    assert helpers.parse_csv(" a, ,b ") == ["a", "b"]
    assert helpers.parse_csv(" , ", ["*"]) == ["*"]


@pytest.mark.parametrize("raw,expected", [("ibm", "IBM"), (" brk.b ", "BRK.B"), ("   ", ""), (None, "")])
def test_normalize_symbol(raw, expected):
    assert helpers.normalize_symbol(raw) == expected


def test_public_helpers_are_all_in_use():
    public = sorted(name for name in vars(helpers) if name.startswith(("parse_", "normalize_", "utc_")))
    assert public == ["normalize_symbol", "parse_csv", "parse_float", "parse_int", "utc_now_iso"]
