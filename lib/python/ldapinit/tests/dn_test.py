"""Unit test for ldapinit.dn.
"""

import unittest

from ldapinit import dn
from ldapinit import exc


class DnTest(unittest.TestCase):
    """Tests for ldapinit.dn"""

    def test_suffix(self):
        """Test suffix derivation from domain name."""
        self.assertEqual(dn.suffix('example.com'), 'dc=example,dc=com')
        self.assertEqual(dn.suffix('local'), 'dc=local')
        self.assertEqual(
            dn.suffix('ldap.corp.example.org'),
            'dc=ldap,dc=corp,dc=example,dc=org'
        )

    def test_suffix_deterministic(self):
        """Deriving the suffix twice gives the same value."""
        for domain in ['example.com', 'a.b.c', 'single']:
            self.assertEqual(dn.suffix(domain), dn.suffix(domain))

    def test_domain_labels_invalid(self):
        """Test degenerate domains are rejected."""
        for domain in ['', '.', '.example.com', 'example.com.', 'a..b',
                       'ex ample.com', 'a,b.com', 'a=b.com']:
            with self.assertRaises(exc.InvalidInputError) as ctx:
                dn.domain_labels(domain)
            self.assertEqual(ctx.exception.source, 'SLAPD_DOMAIN')

    def test_admin_dn(self):
        """Test default admin identity."""
        self.assertEqual(
            dn.admin_dn('dc=example,dc=com'),
            'cn=admin,dc=example,dc=com'
        )

    def test_admin_cn(self):
        """Test admin display name."""
        self.assertEqual(dn.admin_cn('cn=root,dc=example,dc=com'), 'root')
        self.assertEqual(dn.admin_cn('cn=admin,dc=example,dc=com'), 'admin')
        self.assertEqual(dn.admin_cn('CN=Manager,dc=x'), 'Manager')
        self.assertEqual(dn.admin_cn('cn=root'), 'root')

    def test_admin_cn_invalid(self):
        """Test admin DN not named by cn is rejected."""
        for entry_dn in ['uid=root,dc=example,dc=com', 'root', 'cn=,dc=x']:
            with self.assertRaises(exc.InvalidInputError):
                dn.admin_cn(entry_dn)

    def test_admin_cn_escaped(self):
        """Test escaped or multi-valued first RDN is rejected."""
        for entry_dn in ['cn=Doe\\, John,dc=example,dc=com',
                         'cn=root+uid=root,dc=example,dc=com',
                         'cn=a=b,dc=example,dc=com']:
            with self.assertRaises(exc.InvalidInputError):
                dn.admin_cn(entry_dn)

        self.assertEqual(dn.admin_cn('cn=John Doe,dc=example,dc=com'),
                         'John Doe')


if __name__ == '__main__':
    unittest.main()
