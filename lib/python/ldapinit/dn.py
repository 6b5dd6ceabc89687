"""Distinguished name helpers.
"""

import logging
import re

from ldapinit import exc

_LOGGER = logging.getLogger(__name__)

# Characters that need escaping in a DN attribute value.
_DN_SPECIAL_RE = re.compile(r'[,=+<>#;"\\\s]')
# Escaped and multi-valued RDNs are not supported for the admin entry.
_RDN_VALUE_RE = re.compile(r'[=+<>#;"\\]')

DEFAULT_ADMIN_CN = 'admin'


def domain_labels(domain, source='SLAPD_DOMAIN'):
    """Split domain name into its labels.

    Empty domains and empty labels (leading, trailing or doubled dots) are
    rejected, as are labels that would need DN escaping.
    """
    if not domain:
        raise exc.InvalidInputError(source, 'domain name is empty')

    labels = domain.split('.')
    for label in labels:
        if not label:
            raise exc.InvalidInputError(
                source, 'empty label in domain name: %r' % domain
            )
        if _DN_SPECIAL_RE.search(label):
            raise exc.InvalidInputError(
                source, 'invalid label %r in domain name: %r' % (label, domain)
            )

    return labels


def suffix(domain):
    """Derive the directory suffix from a domain name.

    example.com => dc=example,dc=com
    """
    return ','.join(
        'dc={}'.format(label) for label in domain_labels(domain)
    )


def admin_dn(base, cn=DEFAULT_ADMIN_CN):
    """Default admin identity under the suffix."""
    return 'cn={},{}'.format(cn, base)


def admin_cn(entry_dn, source='SLAPD_ADMIN_USER'):
    """Return the cn value of the first RDN.

    cn=root,dc=example,dc=com => root
    """
    rdn = entry_dn.split(',', 1)[0]
    attr, sep, value = rdn.partition('=')
    if not sep or attr.strip().lower() != 'cn' or not value.strip():
        raise exc.InvalidInputError(
            source, 'first RDN must be cn=<name>: %r' % entry_dn
        )
    if _RDN_VALUE_RE.search(value):
        raise exc.InvalidInputError(
            source, 'escaped or multi-valued RDN not supported: %r' % entry_dn
        )

    return value.strip()
