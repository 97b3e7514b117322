"""EPC-96 (SGTIN-96, GID-96) tag encoding and decoding in pure Python
"""

from .version import __version__ as epc96_version
from .epc import (EpcScheme, EpcResult, Sgtin96Result, Gid96Result,
                  calculate_check_digit, combine_gtin_with_check_digit,
                  validate_check_digit, sgtin_to_gtin, resolve_partition,
                  encode_sgtin_96, parse_sgtin_96, encode_gid_96,
                  parse_gid_96, encode_sgtin_96_from_upc_a)
from .decode import parse_epc


__all__ = ('epc', 'decode', 'epc_errors', 'normalize', 'util', 'log',
           'EpcScheme', 'EpcResult', 'Sgtin96Result', 'Gid96Result',
           'calculate_check_digit', 'combine_gtin_with_check_digit',
           'validate_check_digit', 'sgtin_to_gtin', 'resolve_partition',
           'encode_sgtin_96', 'parse_sgtin_96', 'encode_gid_96',
           'parse_gid_96', 'encode_sgtin_96_from_upc_a', 'parse_epc')

__version__ = epc96_version
