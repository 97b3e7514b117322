"""GS1 mod-10 check digits and GTIN-14 assembly from SGTIN fields."""

from ..epc_errors import ValidationError
from ..normalize import normalize_digits


def calculate_check_digit(gtin):
    '''Given a GTIN (8-14), UPC-A or SSCC payload without its check digit,
    calculate its appropriate check digit.

    Weights alternate 3, 1, 3... starting from the rightmost digit.
    '''
    if isinstance(gtin, str) and not gtin.strip():
        raise ValidationError('payload must contain at least one digit')
    digits = normalize_digits(gtin, 'payload')
    total = 0
    for count, char in enumerate(reversed(digits)):
        digit = int(char)
        if count % 2 == 0:
            digit = digit * 3
        total = total + digit

    return (10 - total % 10) % 10


def combine_gtin_with_check_digit(gtin):
    '''Given a gtin, calculate and append its check digit'''
    digits = normalize_digits(gtin, 'payload')
    return digits + str(calculate_check_digit(digits))


def validate_check_digit(code):
    '''Return True if the last digit of code is the right check digit.

    A wrong check digit is not an error, only a False.
    '''
    digits = normalize_digits(code, 'code')
    if len(digits) < 2:
        raise ValidationError('code must contain at least two digits')
    return calculate_check_digit(digits[:-1]) == int(digits[-1])


def sgtin_to_gtin(company_prefix, item_reference):
    '''Rebuild the GTIN-14 carried by SGTIN company prefix and item
    reference digits.

    The first item reference digit is the GTIN indicator digit; it moves
    in front of the company prefix.
    '''
    company_prefix = normalize_digits(company_prefix, 'company_prefix')
    item_reference = normalize_digits(item_reference, 'item_reference')
    payload = item_reference[:1] + company_prefix + item_reference[1:]
    if len(payload) != 13:
        raise ValidationError(
            'company_prefix and item_reference must total 13 digits')
    return combine_gtin_with_check_digit(payload)
