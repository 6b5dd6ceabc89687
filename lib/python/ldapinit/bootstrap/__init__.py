"""ldapinit bootstrap layout.

Paths and constants used to seed slapd. Values may reference other keys
with jinja2 syntax, ``interpolate`` resolves them to a fixed point.
"""

import io
import logging

import jinja2
import yaml

_LOGGER = logging.getLogger(__name__)


DEFAULTS = {
    'dir_config': '/etc/openldap',
    'dir_schema': '{{ dir_config }}/schema',
    'dir_pki': '{{ dir_config }}/pki',
    'dir_modules': '/usr/lib64/openldap',
    'dir_data': '/var/lib/ldap',
    'dir_run': '/run/slapd',
    'config_store': '{{ dir_config }}/slapd.d',
    'legacy_conf': '{{ dir_config }}/slapd.conf',
    'client_conf': '{{ dir_config }}/ldap.conf',
    'config_ldif': '{{ dir_config }}/slapd.ldif',
    'seed_ldif': '/tmp/ldif',
    # Created by slapadd -n 1 once the mdb database is populated.
    'marker': '{{ dir_data }}/data.mdb',
    'ca_cert': '{{ dir_pki }}/ca.crt',
    'tls_cert': '{{ dir_pki }}/openldap.crt',
    'tls_key': '{{ dir_pki }}/openldap.pem',
    'tls_cipher_suite': 'HIGH:!SSLv3:!SSLv2:!ADH',
    'args_file': '/run/slapd.args',
    'pid_file': '/run/slapd.pid',
    'client_host': 'admin',
    'client_reqcert': 'allow',
    # Cannot be empty, at least 32768.
    'log_level': 2024,
    'nofile': 8192,
    'schemas': [
        'core',
        'cosine',
        'ppolicy',
        'inetorgperson',
        'openldap',
        'nis',
        'misc',
    ],
}


def render(value, params):
    """Renders text, interpolating params.
    """
    return str(jinja2.Template(value).render(params))


def _interpolate_dict(value, params):
    """Recursively interpolate each value in parameters.
    """
    result = {}
    target = dict(value)
    counter = 0
    while counter < 100:
        counter += 1
        result = {
            k: _interpolate(v, params)
            for k, v in target.items()
        }
        if result == target:
            break
        target = dict(result)
    else:
        raise Exception('Too many recursions: %s %s' % (value, params))

    return result


def _interpolate_list(value, params):
    """Interpolate each of the list element.
    """
    return [_interpolate(member, params) for member in value]


def _interpolate_scalar(value, params):
    """Interpolate string value by rendering the template.
    """
    if isinstance(value, str):
        return render(value, params)
    else:
        # Do not interpolate numbers.
        return value


def _interpolate(value, params=None):
    """Interpolate the value, switching by the value type.
    """
    if params is None:
        params = value

    try:
        if isinstance(value, list):
            return _interpolate_list(value, params)
        if isinstance(value, dict):
            return _interpolate_dict(value, params)
        return _interpolate_scalar(value, params)
    except Exception:
        _LOGGER.critical('error interpolating: %s %s', value, params)
        raise


def interpolate(value, params=None):
    """Interpolate value.
    """
    return _interpolate(value, params)


def load_overrides(path):
    """Load layout overrides from YAML file.
    """
    with io.open(path, 'rb') as fd:
        overrides = yaml.safe_load(stream=fd)

    if overrides is None:
        return {}

    if not isinstance(overrides, dict):
        raise ValueError('Layout overrides must be a mapping: %s' % path)

    return overrides


def layout(overrides=None):
    """Return the interpolated layout, overrides applied first.
    """
    params = dict(DEFAULTS)
    if overrides:
        params.update(overrides)

    resolved = interpolate(params)
    _LOGGER.debug('Layout: %r', resolved)
    return resolved


__all__ = ['DEFAULTS', 'interpolate', 'layout', 'load_overrides', 'render']
