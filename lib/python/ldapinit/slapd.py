"""slapd first start bootstrap.

The config store is seeded only once per volume: slapadd creates the
persistence marker when it populates the mdb database, and its presence
skips straight to the daemon handoff.
"""

import io
import logging
import os

from ldapinit import documents
from ldapinit import exc
from ldapinit import fs
from ldapinit import subproc
from ldapinit import templates
from ldapinit import utils

_LOGGER = logging.getLogger(__name__)

CONFIG_DB = 0
DATA_DB = 1


def raise_nofile_limit(layout):
    """Raise the open files limit.

    slapd memory consumption is absurdly high with the container default.
    """
    return utils.set_ulimit('nofile', layout['nofile'])


def prepare(conf):
    """Prepare run directory and client presets, safe to repeat."""
    layout = conf.layout
    fs.mkdir_safe(layout['dir_run'])

    # slapd is configured from the slapd.d directory, never slapd.conf.
    if fs.rm_safe(layout['legacy_conf']):
        _LOGGER.info('Removed legacy config: %s', layout['legacy_conf'])

    templates.create_file(
        layout['client_conf'],
        'ldap.conf',
        host=layout['client_host'],
        ca_cert=layout['ca_cert'],
        reqcert=layout['client_reqcert'],
    )


def is_initialized(conf):
    """Check if the database was populated by a previous start."""
    return os.path.exists(conf.layout['marker'])


def read_password(password_file):
    """Read the admin password, trailing newlines stripped."""
    try:
        with io.open(password_file) as f:
            password = f.read().rstrip('\n')
    except (IOError, OSError) as err:
        raise exc.InvalidInputError(
            'SLAPD_PASSWORD_FILE',
            'unable to read %s: %s' % (password_file, err.strerror)
        )

    if not password:
        raise exc.InvalidInputError(
            'SLAPD_PASSWORD_FILE', 'password file is empty: %s' % password_file
        )

    return password


def hash_password(password):
    """Hash password with slappasswd."""
    try:
        password_hash = subproc.check_output(
            ['slappasswd', '-s', password],
            sensitive=True,
        ).strip()
    except subproc.CalledProcessError as err:
        raise exc.ToolError('slappasswd', err.returncode)

    if not password_hash:
        raise exc.ToolError('slappasswd', 0, 'empty password hash')

    return password_hash


def write_document(doc, filename):
    """Write document readable by owner only, it may hold the password hash.
    """
    fs.write_safe(
        filename,
        doc.write,
        mode='wb',
        permission=0o600,
    )


def load_document(conf, filename, dbnum):
    """Load document file with slapadd into database dbnum."""
    try:
        subproc.check_call(
            [
                'slapadd',
                '-n', str(dbnum),
                '-F', conf.layout['config_store'],
                '-l', filename,
            ]
        )
    except subproc.CalledProcessError as err:
        raise exc.ToolError('slapadd -n {}'.format(dbnum), err.returncode)


def initialize(conf):
    """Seed config store and database on first start.

    Both documents are written before slapadd runs, a filled config store
    is left behind only if slapadd itself fails.
    """
    _LOGGER.info('Perform first start configuration')

    password_hash = hash_password(read_password(conf.password_file))

    if conf.tls_enabled:
        _LOGGER.info('Enabling TLS support')

    config_doc = documents.config_document(conf, password_hash)
    seed_doc = documents.seed_document(conf)

    write_document(config_doc, conf.layout['config_ldif'])
    write_document(seed_doc, conf.layout['seed_ldif'])

    _LOGGER.info(
        'Configuring slapd from:\n'
        '-------------------------------\n'
        '%s'
        '-------------------------------',
        config_doc.dumps()
    )
    fs.mkdir_safe(conf.layout['config_store'])
    load_document(conf, conf.layout['config_ldif'], CONFIG_DB)

    _LOGGER.info('Admin user: %s', conf.admin_cn)
    _LOGGER.info('Configuring initial database...')
    load_document(conf, conf.layout['seed_ldif'], DATA_DB)


def listener_urls(conf):
    """URLs slapd listens on."""
    urls = ['ldap://', 'ldapi:///']
    if conf.tls_enabled:
        urls.append('ldaps://')
    return urls


def handoff_args(conf, extra_args=()):
    """Build slapd command line."""
    return [
        'slapd',
        '-F', conf.layout['config_store'],
        '-d', str(conf.layout['log_level']),
        '-h', ' '.join(listener_urls(conf)),
    ] + list(extra_args)


def handoff(conf, extra_args=()):
    """Replace current process with slapd, never returns."""
    _LOGGER.info(
        'Starting slapd with config dir %s...', conf.layout['config_store']
    )
    subproc.safe_exec(handoff_args(conf, extra_args))


def run(conf, extra_args=()):
    """Bootstrap once, then exec slapd."""
    prepare(conf)

    if is_initialized(conf):
        _LOGGER.info('Configuration and database already present')
    else:
        initialize(conf)

    handoff(conf, extra_args)
