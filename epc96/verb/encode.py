"""Encode commands: SGTIN-96, GID-96 and UPC-A to SGTIN-96.
"""

import click

from epc96.epc.gid_96 import encode_gid_96
from epc96.epc.sgtin_96 import encode_sgtin_96
from epc96.epc.upc import encode_sgtin_96_from_upc_a
from epc96.log import get_logger
from epc96.verb.decode import format_result

logger = get_logger(__name__)


def sgtin(args):
    result = encode_sgtin_96(args.company_prefix, args.item_reference,
                             args.serial, tag_filter=args.filter,
                             partition=args.partition)
    click.echo(format_result(result, args.json))
    return 0


def gid(args):
    result = encode_gid_96(args.manager_number, args.object_class,
                           args.serial)
    click.echo(format_result(result, args.json))
    return 0


def upc(args):
    result = encode_sgtin_96_from_upc_a(
        args.upc, args.company_prefix_length, args.serial,
        indicator_digit=args.indicator_digit, tag_filter=args.filter,
        partition=args.partition)
    logger.debugfast('UPC %s encoded as %s', args.upc, result.hex)
    click.echo(format_result(result, args.json))
    return 0
