#!/usr/bin/env python
"""ldapinit setup.py.
"""

import io

import setuptools


def _read_requires(filename):
    reqs = []
    with io.open(filename) as f:
        for line in f:
            req = line.split('#', 1)[0].strip()
            if req:
                reqs.append(req)
    return reqs


setuptools.setup(
    name='ldapinit',
    version='1.0',
    description='OpenLDAP container first start bootstrap',
    package_dir={'': 'lib/python'},
    packages=setuptools.find_packages('lib/python'),
    package_data={
        'ldapinit': [
            'logging/*.json',
            'templates/ldap.conf',
        ],
    },
    python_requires='>=3.6',
    install_requires=_read_requires('requirements.txt'),
    extras_require={
        'test': ['mock', 'pytest'],
    },
    entry_points={
        'console_scripts': [
            'ldapinit = ldapinit.console:run',
        ],
    },
)
