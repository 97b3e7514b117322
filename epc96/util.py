"""96-bit register packing, slicing and text renderings."""

from collections import namedtuple
import re

from .epc_errors import FormatError, LayoutError, RangeError

EPC96_BITS = 96
EPC96_HEX_LENGTH = EPC96_BITS // 4
HEADER_BITS = 8

HEX_RE = re.compile(r'[0-9A-F]+')
BINARY_RE = re.compile(r'[01]+')

# One (name, value, bits) component of a register, most significant first.
Field = namedtuple('Field', ['name', 'value', 'bits'])


def BITMASK(n):
    return (1 << (n)) - 1


def assert_fits_bits(value, bits, field):
    if value < 0 or value > BITMASK(bits):
        raise RangeError('{} must fit within {} bits'.format(field, bits))


def build_register(fields):
    '''Pack fields into a 96-bit integer.

    Fields are consumed in order, the first one landing in the most
    significant bits. Every check runs before the value is returned, so a
    short or overflowing layout never yields a truncated register.
    '''
    remaining = EPC96_BITS
    register = 0
    for field in fields:
        if field.bits <= 0:
            raise LayoutError('{}: non-positive bit width {}'.format(
                field.name, field.bits))
        remaining -= field.bits
        if remaining < 0:
            raise LayoutError('{}: exceeds {} bits'.format(
                field.name, EPC96_BITS))
        assert_fits_bits(field.value, field.bits, field.name)
        register |= (field.value & BITMASK(field.bits)) << remaining
    if remaining != 0:
        raise LayoutError('fields do not sum to {} bits ({} left)'.format(
            EPC96_BITS, remaining))
    return register


def extract_bits(register, offset, length):
    '''Return the length-bit slice starting offset bits below the MSB.

    Bounds are the caller's business; layouts are table-driven.
    '''
    shift = EPC96_BITS - offset - length
    return (register >> shift) & BITMASK(length)


def header_of(register):
    return extract_bits(register, 0, HEADER_BITS)


def format_hex(register):
    return '{:0{width}X}'.format(register, width=EPC96_HEX_LENGTH)


def format_binary(register):
    return '{:0{width}b}'.format(register, width=EPC96_BITS)


def normalize_hex(text):
    '''Strip and uppercase an EPC hex string, then check it is exactly 24
    hex characters. A "0x" prefix is not accepted.'''
    if not isinstance(text, str):
        raise FormatError('EPC must be a hex string')
    normalized = text.strip().upper()
    if not HEX_RE.fullmatch(normalized):
        raise FormatError('EPC must be a hex string')
    if len(normalized) != EPC96_HEX_LENGTH:
        raise FormatError(
            'EPC must be {} hex characters'.format(EPC96_HEX_LENGTH))
    return normalized


def parse_hex(text):
    return int(normalize_hex(text), 16)


def parse_binary(text):
    if not isinstance(text, str):
        raise FormatError('EPC must be a binary string')
    normalized = text.strip()
    if not BINARY_RE.fullmatch(normalized):
        raise FormatError('EPC must be a binary string')
    if len(normalized) != EPC96_BITS:
        raise FormatError(
            'EPC must be {} binary digits'.format(EPC96_BITS))
    return int(normalized, 2)
