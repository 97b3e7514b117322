"""EPC-96 tag codecs: SGTIN-96, GID-96 and the UPC-A bridge."""

from .types import EpcScheme, EpcResult, Sgtin96Result, Gid96Result
from .gtin import (calculate_check_digit, combine_gtin_with_check_digit,
                   validate_check_digit, sgtin_to_gtin)
from .sgtin_96 import (SGTIN_96_HEADER, SGTIN_96_PARTITIONS,
                       resolve_partition, encode_sgtin_96, parse_sgtin_96,
                       is_sgtin_96_header)
from .gid_96 import (GID_96_HEADER, encode_gid_96, parse_gid_96,
                     is_gid_96_header)
from .upc import encode_sgtin_96_from_upc_a
