"""Unit tests for the Decimal-preserving JSON parser."""

from __future__ import annotations

from decimal import Decimal
from io import BytesIO

import pytest
from rest_framework.exceptions import ParseError

from modules.core.parsers import DecimalJSONParser

pytestmark = pytest.mark.unit


def _parse(raw: bytes):
    return DecimalJSONParser().parse(BytesIO(raw))


def test_fractional_numbers_become_decimal():
    data = _parse(b'{"Price": 1234567890123456.78}')
    assert data["Price"] == Decimal("1234567890123456.78")


def test_integers_stay_int():
    data = _parse(b'{"Id": 3, "Price": 10}')
    assert data == {"Id": 3, "Price": 10}
    assert isinstance(data["Id"], int)


def test_null_body_parses_to_none():
    assert _parse(b"null") is None


def test_malformed_json_raises_parse_error():
    with pytest.raises(ParseError):
        _parse(b"{")


def test_nan_is_rejected():
    with pytest.raises(ParseError):
        _parse(b'{"Price": NaN}')
