'''
Encoding and decoding of GID-96 (General Identifier) tags.

GID Format (bits):
Header    Manager Number  Object Class  Serial
8         28              24            36

No partition table; every field has a fixed width.
'''

from ..log import get_logger
from ..normalize import normalize_big_int
from ..util import Field, build_register, extract_bits, assert_fits_bits, \
    format_hex, format_binary
from .types import EpcScheme, Gid96Result

logger = get_logger(__name__)

GID_96_HEADER = 0x35

# (name, offset from MSB, bits)
GID_96_LAYOUT = (
    ('manager_number', 8, 28),
    ('object_class', 36, 24),
    ('serial', 60, 36),
)


def is_gid_96_header(header):
    return header == GID_96_HEADER


def _make_result(register, manager_number, object_class, serial):
    fields = {
        'manager_number': str(manager_number),
        'object_class': str(object_class),
        'serial': str(serial),
    }
    return Gid96Result(
        scheme=EpcScheme.GID_96,
        hex=format_hex(register),
        binary=format_binary(register),
        uri='urn:epc:tag:gid-96:{manager_number}.{object_class}.{serial}'
            .format(**fields),
        id_uri='urn:epc:id:gid:{manager_number}.{object_class}.{serial}'
               .format(**fields),
        fields=fields)


def encode_gid_96(manager_number, object_class, serial):
    '''Build a GID-96 tag.

    >>> encode_gid_96(1, 2, 3).uri
    'urn:epc:tag:gid-96:1.2.3'
    '''
    values = {
        'manager_number': normalize_big_int(manager_number, 'manager_number'),
        'object_class': normalize_big_int(object_class, 'object_class'),
        'serial': normalize_big_int(serial, 'serial'),
    }
    fields = [Field('header', GID_96_HEADER, 8)]
    for name, _, bits in GID_96_LAYOUT:
        assert_fits_bits(values[name], bits, name)
        fields.append(Field(name, values[name], bits))

    register = build_register(fields)
    result = _make_result(register, **values)
    logger.debugfast('encoded %s as %s', result.uri, result.hex)
    return result


def parse_gid_96(register):
    values = {name: extract_bits(register, offset, bits)
              for name, offset, bits in GID_96_LAYOUT}
    result = _make_result(register, **values)
    logger.debugfast('parsed %s from %s', result.uri, result.hex)
    return result
