"""ldapinit module main entry point.
"""

import logging

import click

from ldapinit import cli
from ldapinit import logging as ll


@click.group(cls=cli.make_commands('ldapinit.cli'))
@click.option('--logging-conf', default='daemon.json',
              help='Logging config file to use.')
@click.option('--debug/--no-debug',
              help='Sets logging level to debug',
              is_flag=True, default=False)
@click.pass_context
def run(ctx, logging_conf, debug):
    """OpenLDAP container bootstrap."""
    ctx.obj = {}
    ctx.obj['logging.debug'] = False

    cli.init_logger(logging_conf)
    if debug:
        ctx.obj['logging.debug'] = True
        ll.set_log_level(logging.DEBUG)
