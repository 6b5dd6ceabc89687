"""Bootstrap slapd on first start and exec it.
"""

import logging

import click

from ldapinit import cli
from ldapinit import config
from ldapinit import slapd

_LOGGER = logging.getLogger(__name__)


def init():
    """Top level command handler."""

    @click.command(context_settings={'ignore_unknown_options': True})
    @cli.bootstrap_options
    @click.argument('daemon_args', nargs=-1, type=click.UNPROCESSED)
    @cli.ON_EXCEPTIONS
    def start(password_file, domain, organization, admin_user, tls_enabled,
              defaults, daemon_args):
        """Configure slapd on first start, then exec it.

        Extra arguments are passed to slapd as is.
        """
        layout = cli.make_layout(defaults)
        slapd.raise_nofile_limit(layout)

        conf = config.create(
            password_file=password_file,
            domain=domain,
            organization=organization,
            admin_user=admin_user,
            tls_enabled=tls_enabled,
            layout=layout,
        )
        slapd.run(conf, daemon_args)

    return start
