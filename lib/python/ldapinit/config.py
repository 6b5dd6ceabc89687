"""Bootstrap configuration.

All inputs are read once, validated and resolved into an immutable
``BootstrapConfig`` passed to every bootstrap step.
"""

import collections
import logging

from ldapinit import bootstrap
from ldapinit import dn
from ldapinit import exc

_LOGGER = logging.getLogger(__name__)

DEFAULT_ORGANIZATION = 'SUSE'


BootstrapConfig = collections.namedtuple(
    'BootstrapConfig',
    [
        'password_file',
        'domain',
        'organization',
        'admin_dn',
        'tls_enabled',
        'suffix',
        'labels',
        'admin_cn',
        'layout',
    ]
)


def create(password_file, domain, organization=None, admin_user=None,
           tls_enabled=None, layout=None):
    """Validate inputs and resolve defaults.

    :param ``str`` password_file:
        File holding the admin password, required.
    :param ``str`` domain:
        Domain the suffix is derived from, required.
    :param ``str`` organization:
        Organization name, defaults to ``SUSE``.
    :param ``str`` admin_user:
        Admin DN, defaults to ``cn=admin,<suffix>``.
    :param tls_enabled:
        Any non-empty value enables TLS.
    :param ``dict`` layout:
        Interpolated layout, defaults to ``bootstrap.layout()``.
    :raises ``exc.InvalidInputError``:
        If required input is missing or malformed.
    """
    if not password_file:
        raise exc.InvalidInputError(
            'SLAPD_PASSWORD_FILE',
            'SLAPD_PASSWORD_FILE must be set so the initial admin account '
            'is created'
        )

    if not domain:
        raise exc.InvalidInputError(
            'SLAPD_DOMAIN',
            'SLAPD_DOMAIN must be set with the initial domain name'
        )

    labels = dn.domain_labels(domain)
    suffix = dn.suffix(domain)

    if not organization:
        organization = DEFAULT_ORGANIZATION

    if not admin_user:
        admin_user = dn.admin_dn(suffix)

    if layout is None:
        layout = bootstrap.layout()

    conf = BootstrapConfig(
        password_file=password_file,
        domain=domain,
        organization=organization,
        admin_dn=admin_user,
        tls_enabled=bool(tls_enabled),
        suffix=suffix,
        labels=labels,
        admin_cn=dn.admin_cn(admin_user),
        layout=layout,
    )

    _LOGGER.info(
        'Suffix: %s, admin: %s, organization: %s, tls: %s',
        conf.suffix, conf.admin_dn, conf.organization, conf.tls_enabled
    )
    return conf
