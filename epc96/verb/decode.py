"""Decode command.

Turns EPC hex strings read off tags back into their components.
"""

import json

import click

from epc96.decode import parse_epc
from epc96.log import get_logger

logger = get_logger(__name__)


def format_result(result, as_json=False):
    if as_json:
        return json.dumps(result.as_dict(), sort_keys=True)
    lines = [
        'scheme: {}'.format(result.scheme),
        'hex: {}'.format(result.hex),
        'uri: {}'.format(result.uri),
        'id_uri: {}'.format(result.id_uri),
    ]
    for name in sorted(result.fields):
        lines.append('{}: {}'.format(name, result.fields[name]))
    return '\n'.join(lines)


def main(args):
    if not args.epc:
        logger.info('No EPC specified.')
        return 0

    for num, epc in enumerate(args.epc):
        result = parse_epc(epc)
        logger.debugfast('%s decoded as %s', epc, result.scheme)
        if num and not args.json:
            click.echo('')
        click.echo(format_result(result, args.json))
    return 0
