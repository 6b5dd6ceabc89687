"""Initial slapd documents.

``config_document`` seeds the cn=config store (slapadd -n 0),
``seed_document`` the mdb database (slapadd -n 1).
"""

import logging

from ldapinit import ldif

_LOGGER = logging.getLogger(__name__)

_MDB_INDEXES = [
    'default pres,eq',
    'uid',
    'cn,sn,mail pres,eq,sub',
    'objectClass eq',
]


def _frontend_acls(admin_dn):
    """Global ACLs, default read access disabled."""
    acls = [
        'to dn.base="" by * read',
        'to dn.base="cn=Subschema" by * read',
        'to attrs=userPassword by anonymous auth '
        'by dn="{}" write by * none'.format(admin_dn),
        'to attrs=mail by self read by users read by * none',
        'to * by * none',
    ]
    return ['{{{}}}{}'.format(idx, acl) for idx, acl in enumerate(acls)]


def _schema_urls(layout):
    """Schema files to include."""
    return [
        'file://{}/{}.ldif'.format(layout['dir_schema'], name)
        for name in layout['schemas']
    ]


def config_document(conf, rootpw):
    """Build the cn=config document.

    :param ``BootstrapConfig`` conf:
        Bootstrap configuration.
    :param ``str`` rootpw:
        Hashed admin password.
    """
    layout = conf.layout
    doc = ldif.Document()

    config = doc.entry('cn=config')
    config.add('objectClass', 'olcGlobal')
    config.add('cn', 'config')
    config.add('olcArgsFile', layout['args_file'])
    config.add('olcPidFile', layout['pid_file'])
    if conf.tls_enabled:
        config.add('olcTLSCipherSuite', layout['tls_cipher_suite'])
        config.add('olcTLSCACertificateFile', layout['ca_cert'])
        config.add('olcTLSCertificateFile', layout['tls_cert'])
        config.add('olcTLSCertificateKeyFile', layout['tls_key'])

    doc.entry('cn=module,cn=config').add(
        'objectClass', 'olcModuleList'
    ).add(
        'cn', 'module'
    ).add(
        'olcModulepath', layout['dir_modules']
    ).add(
        'olcModuleload', 'back_mdb.la'
    )

    doc.entry('cn=schema,cn=config').add(
        'objectClass', 'olcSchemaConfig'
    ).add(
        'cn', 'schema'
    )
    doc.include(_schema_urls(layout))

    doc.entry('olcDatabase=frontend,cn=config').add(
        'objectClass', 'olcDatabaseConfig', 'olcFrontendConfig'
    ).add(
        'olcDatabase', 'frontend'
    ).add(
        'olcAccess', *_frontend_acls(conf.admin_dn)
    )

    mdb = doc.entry('olcDatabase=mdb,cn=config')
    mdb.add('objectClass', 'olcDatabaseConfig', 'olcMdbConfig')
    mdb.add('olcDatabase', 'mdb')
    mdb.add('olcSuffix', conf.suffix)
    mdb.add('olcRootDN', conf.admin_dn)
    mdb.add('olcRootPW', rootpw)
    mdb.add('olcDbDirectory', layout['dir_data'])
    mdb.add('olcDbIndex', *_MDB_INDEXES)
    if conf.tls_enabled:
        mdb.add('olcSecurity', 'tls=1')

    return doc


def seed_document(conf):
    """Build the initial directory content: suffix and admin role."""
    doc = ldif.Document()

    doc.entry(conf.suffix).add(
        'objectClass', 'dcObject', 'organization'
    ).add(
        'dc', conf.labels[0]
    ).add(
        'o', conf.organization
    ).add(
        'description', conf.organization
    )

    doc.entry(conf.admin_dn).add(
        'objectClass', 'organizationalRole'
    ).add(
        'cn', conf.admin_cn
    )

    return doc
