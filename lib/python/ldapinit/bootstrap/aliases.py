"""OpenLDAP tool aliases.

Each alias is an absolute path or a list of candidate paths, the first
executable candidate wins.
"""

ALIASES = {
    'slapadd': ['/usr/sbin/slapadd', '/usr/bin/slapadd'],
    'slapd': ['/usr/sbin/slapd', '/usr/lib/openldap/slapd'],
    'slappasswd': ['/usr/sbin/slappasswd', '/usr/bin/slappasswd'],
}
