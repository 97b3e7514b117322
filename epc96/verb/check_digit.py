"""GS1 check digit command.
"""

import click

from epc96.epc.gtin import combine_gtin_with_check_digit, \
    validate_check_digit
from epc96.log import get_logger

logger = get_logger(__name__)


def main(args):
    if args.validate:
        if validate_check_digit(args.payload):
            click.echo('valid')
            return 0
        logger.warning('Wrong check digit in %s', args.payload)
        click.echo('invalid')
        return 1

    click.echo(combine_gtin_with_check_digit(args.payload))
    return 0
