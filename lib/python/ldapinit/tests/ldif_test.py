"""Unit test for ldapinit.ldif.
"""

import io
import unittest

from ldapinit import ldif
from ldapinit.tests import ldif_lines
from ldapinit.tests import ldif_values


class LdifTest(unittest.TestCase):
    """Tests for ldapinit.ldif"""

    def test_entry(self):
        """Test entry attributes."""
        entry = ldif.Entry('cn=config')
        entry.add('objectClass', 'olcGlobal').add('olcIdleTimeout', 10)
        entry.add('objectClass', 'top')

        self.assertEqual(entry.get('objectClass'), ['olcGlobal', 'top'])
        self.assertEqual(entry.get('olcIdleTimeout'), ['10'])
        self.assertEqual(entry.get('cn'), [])

    def test_document(self):
        """Test document serialization."""
        doc = ldif.Document()
        doc.entry('cn=schema,cn=config').add(
            'objectClass', 'olcSchemaConfig'
        ).add('cn', 'schema')
        doc.include(['file:///s/core.ldif', 'file:///s/cosine.ldif'])
        doc.entry('olcDatabase=mdb,cn=config').add('olcDatabase', 'mdb')

        text = doc.dumps()
        blocks = text.strip('\n').split('\n\n')

        self.assertEqual(len(blocks), 3)
        self.assertEqual(
            blocks[0].splitlines()[0], 'dn: cn=schema,cn=config'
        )
        self.assertIn('objectClass: olcSchemaConfig', blocks[0].splitlines())
        self.assertEqual(
            blocks[1].splitlines(),
            [
                'include: file:///s/core.ldif',
                'include: file:///s/cosine.ldif',
            ]
        )
        self.assertEqual(
            blocks[2].splitlines(),
            ['dn: olcDatabase=mdb,cn=config', 'olcDatabase: mdb']
        )
        self.assertTrue(text.endswith('\n\n'))

    def test_document_write(self):
        """Test writing to binary stream matches dumps."""
        doc = ldif.Document()
        doc.entry('dc=example,dc=com').add('dc', 'example')

        stream = io.BytesIO()
        doc.write(stream)

        self.assertEqual(stream.getvalue().decode(), doc.dumps())

    def test_long_value(self):
        """Long values are folded, unfolding restores them."""
        value = 'to attrs=userPassword by anonymous auth by dn="{}" ' \
                'write by * none'.format('cn=admin,' + 'dc=x,' * 20 + 'dc=y')
        doc = ldif.Document()
        doc.entry('olcDatabase=frontend,cn=config').add('olcAccess', value)

        text = doc.dumps()

        self.assertTrue(all(len(line) <= 78 for line in text.splitlines()))
        self.assertIn('olcAccess: ' + value, ldif_lines(text))

    def test_attribute_order(self):
        """Attributes are written in insertion order."""
        doc = ldif.Document()
        doc.entry('cn=admin,dc=example,dc=com').add(
            'objectClass', 'organizationalRole'
        ).add('cn', 'admin')

        self.assertEqual(
            doc.dumps().splitlines(),
            [
                'dn: cn=admin,dc=example,dc=com',
                'objectClass: organizationalRole',
                'cn: admin',
                '',
            ]
        )

    def test_unsafe_values(self):
        """Non-ASCII and leading space values are base64 encoded."""
        doc = ldif.Document()
        doc.entry('dc=example,dc=com').add(
            'o', 'Société Générale', ' Leading', '日本'
        ).add('description', 'plain')

        text = doc.dumps()

        self.assertIn('o:: U29jacOpdMOpIEfDqW7DqXJhbGU=', text.splitlines())
        self.assertIn('o:: IExlYWRpbmc=', text.splitlines())
        self.assertIn('description: plain', text.splitlines())
        self.assertEqual(
            ldif_values(text, 'o'),
            ['Société Générale', ' Leading', '日本']
        )

    def test_unsafe_dn(self):
        """Non-ASCII DN is base64 encoded."""
        doc = ldif.Document()
        doc.entry('dc=société,dc=com').add('dc', 'société')

        text = doc.dumps()

        self.assertTrue(text.startswith('dn:: '))
        self.assertEqual(ldif_values(text, 'dn'), ['dc=société,dc=com'])
        self.assertEqual(ldif_values(text, 'dc'), ['société'])

    def test_find(self):
        """Test entry lookup."""
        doc = ldif.Document()
        config = doc.entry('cn=config')
        doc.include(['file:///s/core.ldif'])

        self.assertIs(doc.find('cn=config'), config)
        self.assertIsNone(doc.find('cn=module,cn=config'))
        self.assertEqual(doc.entries, [config])


if __name__ == '__main__':
    unittest.main()
