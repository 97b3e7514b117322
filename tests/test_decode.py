"""Tests for header based dispatch."""

import pytest

from epc96 import encode_gid_96, encode_sgtin_96, parse_epc
from epc96.epc.types import EpcScheme, Gid96Result, Sgtin96Result
from epc96.epc_errors import FormatError, UnsupportedHeaderError


def test_parses_sgtin_96():
    encoded = encode_sgtin_96('0614141', '812345', 6789, tag_filter=1)
    parsed = parse_epc(encoded.hex)
    assert parsed.scheme == EpcScheme.SGTIN_96
    assert isinstance(parsed, Sgtin96Result)
    assert parsed == encoded


def test_parses_gid_96():
    encoded = encode_gid_96(5, 6, 7)
    parsed = parse_epc(encoded.hex)
    assert parsed.scheme == EpcScheme.GID_96
    assert isinstance(parsed, Gid96Result)
    assert parsed == encoded


def test_accepts_lowercase_and_whitespace():
    parsed = parse_epc(' 3074257bf7194e4000001a85 ')
    assert parsed.uri == 'urn:epc:tag:sgtin-96:3.0614141.812345.6789'
    assert parsed.hex == '3074257BF7194E4000001A85'


def test_rejects_unsupported_header():
    with pytest.raises(UnsupportedHeaderError,
                       match='Unsupported EPC header 0xFF') as excinfo:
        parse_epc('FF0000000000000000000000')
    assert excinfo.value.header == 0xFF


def test_header_is_two_hex_digits():
    with pytest.raises(UnsupportedHeaderError,
                       match='Unsupported EPC header 0x0A'):
        parse_epc('0A0000000000000000000000')


def test_rejects_malformed_hex():
    with pytest.raises(FormatError):
        parse_epc('3074257BF7194E4000001A8')
    with pytest.raises(FormatError):
        parse_epc('3074257BF7194E4000001A8Z')
