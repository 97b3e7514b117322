'''
Encoding and decoding of SGTIN-96 tags.

SGTIN Format (bits):
Header    Filter  Partition   Company Prefix  Item Reference  Serial
8         3       3           20-40           24-4            38

Documentation here:
https://ref.gs1.org/standards/tds/

'''

from collections import namedtuple

from ..epc_errors import UnsupportedPartitionError, PartitionMismatchError, \
    UnsupportedPrefixLengthError
from ..log import get_logger
from ..normalize import normalize_digits, normalize_big_int, pad_digits, \
    format_digits, normalize_small_int, as_integer
from ..util import Field, build_register, extract_bits, assert_fits_bits, \
    format_hex, format_binary
from .gtin import sgtin_to_gtin
from .types import EpcScheme, Sgtin96Result

logger = get_logger(__name__)

SGTIN_96_HEADER = 0x30
SGTIN_96_FILTER_BITS = 3
SGTIN_96_PARTITION_BITS = 3
SGTIN_96_SERIAL_BITS = 38
# header + filter + partition
SGTIN_96_COMPANY_OFFSET = 14
# indicator + company prefix + item reference, before the check digit
GTIN_PAYLOAD_DIGITS = 13

PartitionDefinition = namedtuple('PartitionDefinition', [
    'partition', 'company_prefix_digits', 'company_prefix_bits',
    'item_reference_digits', 'item_reference_bits'])

'''
Table defining partition sizes for SGTIN-96.
Digits always add up to 13 and bits to 44.
'''
SGTIN_96_PARTITIONS = (
    PartitionDefinition(0, 12, 40, 1, 4),
    PartitionDefinition(1, 11, 37, 2, 7),
    PartitionDefinition(2, 10, 34, 3, 10),
    PartitionDefinition(3, 9, 30, 4, 14),
    PartitionDefinition(4, 8, 27, 5, 17),
    PartitionDefinition(5, 7, 24, 6, 20),
    PartitionDefinition(6, 6, 20, 7, 24),
)


def get_partition(partition):
    index = as_integer(partition)
    if index is None or not 0 <= index < len(SGTIN_96_PARTITIONS):
        raise UnsupportedPartitionError(partition)
    return SGTIN_96_PARTITIONS[index]


def resolve_partition(company_prefix_digits, partition=None):
    '''Return the partition value for a company prefix of the given
    length. An explicit partition is checked against that length instead.'''
    if partition is not None:
        definition = get_partition(partition)
        if definition.company_prefix_digits != company_prefix_digits:
            raise PartitionMismatchError(
                partition, definition.company_prefix_digits,
                company_prefix_digits)
        return definition.partition
    for definition in SGTIN_96_PARTITIONS:
        if definition.company_prefix_digits == company_prefix_digits:
            return definition.partition
    raise UnsupportedPrefixLengthError(company_prefix_digits)


def is_sgtin_96_header(header):
    return header == SGTIN_96_HEADER


def _make_result(register, tag_filter, partition, company_prefix,
                 item_reference, serial):
    uri_template = ('urn:epc:tag:sgtin-96:{filter}.{company_prefix}.'
                    '{item_reference}.{serial}')
    id_uri_template = ('urn:epc:id:sgtin:{company_prefix}.'
                       '{item_reference}.{serial}')
    fields = {
        'filter': tag_filter,
        'partition': partition,
        'company_prefix': company_prefix,
        'item_reference': item_reference,
        'serial': str(serial),
        'gtin': None,
    }
    # parsed registers may hold more digits than the partition allows
    if len(company_prefix) + len(item_reference) == GTIN_PAYLOAD_DIGITS:
        fields['gtin'] = sgtin_to_gtin(company_prefix, item_reference)
    return Sgtin96Result(
        scheme=EpcScheme.SGTIN_96,
        hex=format_hex(register),
        binary=format_binary(register),
        uri=uri_template.format(**fields),
        id_uri=id_uri_template.format(**fields),
        fields=fields)


def encode_sgtin_96(company_prefix, item_reference, serial, tag_filter=None,
                    partition=None):
    '''Given GS1 components, build a SGTIN-96 tag.

    The length of company_prefix selects the partition, so it must be
    given with its leading zeros (as a string). item_reference is
    left-padded to the partition's digit count.

    >>> encode_sgtin_96('0614141', '812345', 12345, tag_filter=3).uri
    'urn:epc:tag:sgtin-96:3.0614141.812345.12345'
    '''
    if tag_filter is None:
        tag_filter = 0
    tag_filter = normalize_small_int(tag_filter, 'filter', 0, 7)
    company_prefix = normalize_digits(company_prefix, 'company_prefix')
    item_reference = normalize_digits(item_reference, 'item_reference')
    serial = normalize_big_int(serial, 'serial')

    partition = resolve_partition(len(company_prefix), partition)
    definition = SGTIN_96_PARTITIONS[partition]
    company_prefix = pad_digits(company_prefix,
                                definition.company_prefix_digits,
                                'company_prefix')
    item_reference = pad_digits(item_reference,
                                definition.item_reference_digits,
                                'item_reference')
    assert_fits_bits(serial, SGTIN_96_SERIAL_BITS, 'serial')

    register = build_register([
        Field('header', SGTIN_96_HEADER, 8),
        Field('filter', tag_filter, SGTIN_96_FILTER_BITS),
        Field('partition', partition, SGTIN_96_PARTITION_BITS),
        Field('company_prefix', int(company_prefix),
              definition.company_prefix_bits),
        Field('item_reference', int(item_reference),
              definition.item_reference_bits),
        Field('serial', serial, SGTIN_96_SERIAL_BITS),
    ])
    result = _make_result(register, tag_filter, partition, company_prefix,
                          item_reference, serial)
    logger.debugfast('encoded %s as %s', result.uri, result.hex)
    return result


def parse_sgtin_96(register):
    '''Given a SGTIN-96 register (96-bit int), parse each segment.

    Header is not checked here; see epc96.decode.parse_epc.'''
    tag_filter = extract_bits(register, 8, SGTIN_96_FILTER_BITS)
    partition = extract_bits(register, 11, SGTIN_96_PARTITION_BITS)
    definition = get_partition(partition)

    company_end = SGTIN_96_COMPANY_OFFSET + definition.company_prefix_bits
    company_data = extract_bits(register, SGTIN_96_COMPANY_OFFSET,
                                definition.company_prefix_bits)
    item_data = extract_bits(register, company_end,
                             definition.item_reference_bits)
    serial = extract_bits(register, company_end +
                          definition.item_reference_bits,
                          SGTIN_96_SERIAL_BITS)

    company_prefix = format_digits(company_data,
                                   definition.company_prefix_digits)
    item_reference = format_digits(item_data,
                                   definition.item_reference_digits)
    result = _make_result(register, tag_filter, partition, company_prefix,
                          item_reference, serial)
    logger.debugfast('parsed %s from %s', result.uri, result.hex)
    return result
