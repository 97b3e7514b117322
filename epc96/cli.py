"""Command-line wrapper for epc96 commands.
"""

from collections import namedtuple
import click
from . import __version__
from . import log as loggie
from .epc_errors import EPCError
from .verb import check_digit as _check_digit
from .verb import decode as _decode
from .verb import encode as _encode

logger = loggie.get_logger(__name__)


def run_verb(verb, args):
    """Run a verb, turning codec errors into a clean CLI failure."""
    try:
        status = verb(args)
    except EPCError as exc:
        if loggie.is_general_debug_enabled():
            logger.exception('%s failed', verb.__name__)
        else:
            logger.error('%s: %s', type(exc).__name__, exc)
        raise click.ClickException(str(exc))
    if status:
        click.get_current_context().exit(status)


@click.group()
@click.option('-d', '--debug', is_flag=True, default=False)
@click.option('-l', '--logfile', type=click.Path())
def cli(debug, logfile):
    loggie.init_logging(debug, logfile)


@cli.command()
@click.argument('epc', type=str, nargs=-1)
@click.option('--json', 'as_json', is_flag=True, default=False,
              help='print one JSON object per EPC')
def decode(epc, as_json):
    """Decode 24-character EPC-96 hex strings."""
    Args = namedtuple('Args', ['epc', 'json'])
    args = Args(epc=epc, json=as_json)
    logger.debug('decode args: %s', args)
    run_verb(_decode.main, args)


@cli.command()
@click.argument('company_prefix', type=str)
@click.argument('item_reference', type=str)
@click.argument('serial', type=str)
@click.option('-f', '--filter', 'tag_filter', type=int,
              help='filter value 0-7 (default 0)')
@click.option('-p', '--partition', type=int,
              help='partition 0-6 (default: from company prefix length)')
@click.option('--json', 'as_json', is_flag=True, default=False)
def sgtin(company_prefix, item_reference, serial, tag_filter, partition,
          as_json):
    """Encode a SGTIN-96 tag from GS1 components."""
    Args = namedtuple('Args', ['company_prefix', 'item_reference', 'serial',
                               'filter', 'partition', 'json'])
    args = Args(company_prefix=company_prefix, item_reference=item_reference,
                serial=serial, filter=tag_filter, partition=partition,
                json=as_json)
    logger.debug('sgtin args: %s', args)
    run_verb(_encode.sgtin, args)


@cli.command()
@click.argument('manager_number', type=str)
@click.argument('object_class', type=str)
@click.argument('serial', type=str)
@click.option('--json', 'as_json', is_flag=True, default=False)
def gid(manager_number, object_class, serial, as_json):
    """Encode a GID-96 tag."""
    Args = namedtuple('Args', ['manager_number', 'object_class', 'serial',
                               'json'])
    args = Args(manager_number=manager_number, object_class=object_class,
                serial=serial, json=as_json)
    logger.debug('gid args: %s', args)
    run_verb(_encode.gid, args)


@cli.command()
@click.argument('upc', type=str)
@click.argument('serial', type=str)
@click.option('-c', '--company-prefix-length', type=int, required=True,
              help='number of UPC digits forming the company prefix')
@click.option('-i', '--indicator-digit', type=int,
              help='GTIN-14 indicator digit (default 0)')
@click.option('-f', '--filter', 'tag_filter', type=int,
              help='filter value 0-7 (default 1=point of sale)')
@click.option('-p', '--partition', type=int,
              help='partition 0-6 (default: from company prefix length)')
@click.option('--json', 'as_json', is_flag=True, default=False)
def upc(upc, serial, company_prefix_length, indicator_digit, tag_filter,
        partition, as_json):
    """Encode the SGTIN-96 tag of a serialized UPC-A item."""
    Args = namedtuple('Args', ['upc', 'serial', 'company_prefix_length',
                               'indicator_digit', 'filter', 'partition',
                               'json'])
    args = Args(upc=upc, serial=serial,
                company_prefix_length=company_prefix_length,
                indicator_digit=indicator_digit, filter=tag_filter,
                partition=partition, json=as_json)
    logger.debug('upc args: %s', args)
    run_verb(_encode.upc, args)


@cli.command('check-digit')
@click.argument('payload', type=str)
@click.option('--validate', is_flag=True, default=False,
              help='check the last digit of PAYLOAD instead of appending one')
def check_digit(payload, validate):
    """Append (or validate) a GS1 mod-10 check digit."""
    Args = namedtuple('Args', ['payload', 'validate'])
    args = Args(payload=payload, validate=validate)
    run_verb(_check_digit.main, args)


@cli.command()
def version():
    print(__version__)
