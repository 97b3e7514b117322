"""Tests for numeric input normalization."""

import pytest

from epc96.epc_errors import ValidationError
from epc96.normalize import (normalize_digits, normalize_big_int, pad_digits,
                             normalize_fixed_digits, format_digits,
                             normalize_small_int, as_integer)


def test_normalize_digits_keeps_leading_zeros():
    assert normalize_digits('00123', 'code') == '00123'
    assert normalize_digits('  0614141 ', 'code') == '0614141'


def test_normalize_digits_numbers():
    assert normalize_digits(42, 'code') == '42'
    assert normalize_digits(0, 'code') == '0'
    assert normalize_digits(7.0, 'code') == '7'
    assert normalize_digits(2 ** 80, 'code') == str(2 ** 80)


@pytest.mark.parametrize('value', ['12a', '-1', '1.5', '', ' ', '１２'])
def test_normalize_digits_rejects_non_digit_strings(value):
    with pytest.raises(ValidationError, match='code must contain digits only'):
        normalize_digits(value, 'code')


@pytest.mark.parametrize('value', [-1, 1.5, -2.0, True, None, [1]])
def test_normalize_digits_rejects_bad_numbers(value):
    with pytest.raises(ValidationError, match='^code must'):
        normalize_digits(value, 'code')


def test_normalize_big_int():
    assert normalize_big_int('42', 'value') == 42
    assert normalize_big_int('000', 'value') == 0
    assert normalize_big_int(2 ** 70, 'value') == 2 ** 70
    with pytest.raises(ValidationError, match='value'):
        normalize_big_int(-5, 'value')


def test_pad_digits():
    assert pad_digits('123', 5, 'code') == '00123'
    assert pad_digits('12345', 5, 'code') == '12345'
    with pytest.raises(ValidationError, match='code must be at most 5 digits'):
        pad_digits('123456', 5, 'code')


def test_normalize_fixed_digits():
    assert normalize_fixed_digits('1234', 'code', 4) == '1234'
    with pytest.raises(ValidationError, match='code must be 4 digits'):
        normalize_fixed_digits('123', 'code', 4)
    with pytest.raises(ValidationError, match='code must be 4 digits'):
        normalize_fixed_digits('12345', 'code', 4)


def test_format_digits():
    assert format_digits(42, 4) == '0042'
    assert format_digits(12345, 3) == '12345'


def test_normalize_small_int():
    assert normalize_small_int(3, 'filter', 0, 7) == 3
    assert normalize_small_int(7.0, 'filter', 0, 7) == 7
    for value in (-1, 8, 2.5, '3', True, None):
        with pytest.raises(ValidationError,
                           match='filter must be an integer between 0 and 7'):
            normalize_small_int(value, 'filter', 0, 7)


def test_as_integer():
    assert as_integer(5) == 5
    assert as_integer(5.0) == 5
    assert isinstance(as_integer(5.0), int)
    for value in (5.5, '5', True, None):
        assert as_integer(value) is None
