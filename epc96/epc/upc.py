'''
UPC-A to SGTIN-96 conversion.

A UPC-A is a GTIN-12: company prefix and item reference share 11 digits,
followed by a check digit. The GS1 company prefix is the UPC company
prefix with a leading zero, and the SGTIN item reference starts with the
GTIN-14 indicator digit.
'''

from ..epc_errors import ValidationError, RangeError, CheckDigitMismatchError
from ..normalize import normalize_fixed_digits, normalize_big_int, \
    normalize_small_int, as_integer
from .gtin import calculate_check_digit
from .sgtin_96 import encode_sgtin_96

UPC_A_DIGITS = 12
# point of sale trade item
DEFAULT_UPC_FILTER = 1
DEFAULT_INDICATOR_DIGIT = 0
MAX_UPC_SERIAL = 274877906943
MAX_UPC_SERIAL_DIGITS = 12


def normalize_upc_serial(serial):
    '''Serials coming from a UPC workflow must be 1..2^38-1.

    String serials must also be at most 12 digits without a leading zero,
    so that the same number always has the same spelling.
    '''
    if isinstance(serial, str):
        text = serial.strip()
        if text.isdigit():
            if len(text) > MAX_UPC_SERIAL_DIGITS:
                raise ValidationError('serial must be 1 to {} digits'.format(
                    MAX_UPC_SERIAL_DIGITS))
            if len(text) > 1 and text.startswith('0'):
                raise ValidationError('serial must not start with 0')
    serial = normalize_big_int(serial, 'serial')
    if serial <= 0:
        raise RangeError('serial must be a positive integer')
    if serial > MAX_UPC_SERIAL:
        raise RangeError('serial must be less than or equal to {}'.format(
            MAX_UPC_SERIAL))
    return serial


def encode_sgtin_96_from_upc_a(upc, company_prefix_length, serial,
                               indicator_digit=None, tag_filter=None,
                               partition=None):
    '''Given a UPC-A, build the SGTIN-96 tag of one serialized item.

    >>> result = encode_sgtin_96_from_upc_a('036000291452', 6, 123,
    ...                                     indicator_digit=1)
    >>> result.fields['company_prefix'], result.fields['item_reference']
    ('0036000', '129145')
    '''
    upc = normalize_fixed_digits(upc, 'upc', UPC_A_DIGITS)
    company_prefix_length = as_integer(company_prefix_length)
    if company_prefix_length is None or company_prefix_length <= 0:
        raise ValidationError(
            'company_prefix_length must be a positive integer')
    if company_prefix_length >= UPC_A_DIGITS - 1:
        raise ValidationError(
            'company_prefix_length must leave room for an item reference')

    expected = calculate_check_digit(upc[:-1])
    actual = int(upc[-1])
    if expected != actual:
        raise CheckDigitMismatchError(expected, actual)

    if indicator_digit is None:
        indicator_digit = DEFAULT_INDICATOR_DIGIT
    indicator_digit = normalize_small_int(indicator_digit, 'indicator_digit',
                                          0, 9)
    company_prefix = '0' + upc[:company_prefix_length]
    item_reference = str(indicator_digit) + upc[company_prefix_length:-1]
    serial = normalize_upc_serial(serial)
    if tag_filter is None:
        tag_filter = DEFAULT_UPC_FILTER

    return encode_sgtin_96(company_prefix, item_reference, serial,
                           tag_filter=tag_filter, partition=partition)
