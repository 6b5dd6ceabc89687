"""ldapinit tests.
"""

import base64
import os

from ldapinit import bootstrap


def make_layout(root, **overrides):
    """Layout rooted in a scratch directory."""
    params = {
        'dir_config': os.path.join(root, 'etc', 'openldap'),
        'dir_data': os.path.join(root, 'var', 'lib', 'ldap'),
        'dir_run': os.path.join(root, 'run', 'slapd'),
        'seed_ldif': os.path.join(root, 'tmp', 'ldif'),
    }
    params.update(overrides)
    return bootstrap.layout(params)


def ldif_lines(text):
    """Unfold LDIF text into logical lines."""
    return text.replace('\n ', '').splitlines()


def ldif_values(text, attr):
    """Decoded values of attr in LDIF text, base64 values included."""
    values = []
    for line in ldif_lines(text):
        name, sep, value = line.partition(':')
        if not sep or name != attr:
            continue
        if value.startswith(':'):
            values.append(base64.b64decode(value[1:].strip()).decode('utf8'))
        else:
            values.append(value[1:])
    return values
