"""Header-based dispatch of EPC-96 hex strings to the matching codec.
"""

from .epc.gid_96 import is_gid_96_header, parse_gid_96
from .epc.sgtin_96 import is_sgtin_96_header, parse_sgtin_96
from .epc_errors import UnsupportedHeaderError
from .log import get_logger
from .util import parse_hex, header_of

logger = get_logger(__name__)

# Consulted in order; first matching header wins.
EPC_PARSERS = (
    (is_sgtin_96_header, parse_sgtin_96),
    (is_gid_96_header, parse_gid_96),
)


def parse_epc(hexstring):
    '''Given a 24 character EPC hex string, return the decoded tag.

    >>> parse_epc('3074257BF7194E4000001A85').uri
    'urn:epc:tag:sgtin-96:3.0614141.812345.6789'
    '''
    register = parse_hex(hexstring)
    header = header_of(register)
    for matches, parse in EPC_PARSERS:
        if matches(header):
            logger.debugfast('header 0x%02X handled by %s', header,
                             parse.__name__)
            return parse(register)
    raise UnsupportedHeaderError(header)
