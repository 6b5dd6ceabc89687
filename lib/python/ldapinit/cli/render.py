"""Render the initial slapd documents without loading them.
"""

import logging
import os

import click

from ldapinit import cli
from ldapinit import config
from ldapinit import documents
from ldapinit import slapd

_LOGGER = logging.getLogger(__name__)

_CONFIG_LDIF = 'slapd.ldif'
_SEED_LDIF = 'seed.ldif'


def _write(output_dir, name, doc):
    """Write document into output directory."""
    filename = os.path.join(output_dir, name)
    slapd.write_document(doc, filename)
    cli.out(filename)


def init():
    """Top level command handler."""

    @click.command()
    @cli.bootstrap_options
    @click.option('--rootpw-hash',
                  help='Use this admin password hash, skip slappasswd.')
    @click.option('--output-dir',
                  type=click.Path(file_okay=False),
                  help='Write documents into directory instead of stdout.')
    @cli.ON_EXCEPTIONS
    def render(password_file, domain, organization, admin_user, tls_enabled,
               defaults, rootpw_hash, output_dir):
        """Print the cn=config and seed documents."""
        conf = config.create(
            password_file=password_file,
            domain=domain,
            organization=organization,
            admin_user=admin_user,
            tls_enabled=tls_enabled,
            layout=cli.make_layout(defaults),
        )

        if not rootpw_hash:
            rootpw_hash = slapd.hash_password(
                slapd.read_password(conf.password_file)
            )

        config_doc = documents.config_document(conf, rootpw_hash)
        seed_doc = documents.seed_document(conf)

        if output_dir:
            _write(output_dir, _CONFIG_LDIF, config_doc)
            _write(output_dir, _SEED_LDIF, seed_doc)
        else:
            cli.out(config_doc.dumps())
            cli.out(seed_doc.dumps())

    return render
