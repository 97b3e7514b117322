"""Validation and canonicalization of numeric identifier components.

Identifier components arrive as decimal strings, native ints or integral
floats. Leading zeros are significant in GS1 digit strings, so the digit
helpers keep strings as strings; the integer helpers are for fields such as
serial numbers that are packed as plain binary.
"""

import re

from .epc_errors import ValidationError

DIGITS_RE = re.compile(r'[0-9]+')


def _integer_text(value, field):
    '''Render a native number as a decimal string, rejecting anything that
    is not a non-negative whole number.'''
    if isinstance(value, bool):
        raise ValidationError('{} must be a non-negative integer'.format(field))
    if isinstance(value, float):
        if not value.is_integer() or value < 0:
            raise ValidationError(
                '{} must be a non-negative integer'.format(field))
        return str(int(value))
    if isinstance(value, int):
        if value < 0:
            raise ValidationError(
                '{} must be a non-negative integer'.format(field))
        return str(value)
    raise ValidationError('{} must be a string or an integer, got {}'.format(
        field, type(value).__name__))


def normalize_digits(value, field):
    '''Given a string or a number, return its canonical digit string.

    Strings are stripped but otherwise kept verbatim, so leading zeros
    survive.

    >>> normalize_digits(' 00123 ', 'code')
    '00123'
    '''
    if isinstance(value, str):
        digits = value.strip()
    else:
        digits = _integer_text(value, field)
    if not DIGITS_RE.fullmatch(digits):
        raise ValidationError('{} must contain digits only'.format(field))
    return digits


def normalize_big_int(value, field):
    '''Given a string or a number, return it as a non-negative int.'''
    return int(normalize_digits(value, field))


def pad_digits(digits, length, field):
    '''Left-pad a digit string with zeros up to length.'''
    if len(digits) > length:
        raise ValidationError(
            '{} must be at most {} digits'.format(field, length))
    return digits.zfill(length)


def normalize_fixed_digits(value, field, length):
    digits = normalize_digits(value, field)
    if len(digits) != length:
        raise ValidationError('{} must be {} digits'.format(field, length))
    return digits


def format_digits(value, length):
    '''Render a non-negative int as a decimal string of at least length
    characters.'''
    return str(value).zfill(length)


def as_integer(value):
    '''Return value as an int if it is a native whole number (int or
    integral float), else None. Strings and bools are never accepted.'''
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, int):
        return value
    return None


def normalize_small_int(value, field, low, high):
    '''Validate an enumeration-like integer (filter, indicator digit...).

    Only native numbers are accepted here; these values are never
    identifiers and carry no leading-zero semantics.
    '''
    number = as_integer(value)
    if number is None or number < low or number > high:
        raise ValidationError('{} must be an integer between {} and {}'.format(
            field, low, high))
    return number
