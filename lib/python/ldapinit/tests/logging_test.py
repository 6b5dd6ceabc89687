"""Unit test for ldapinit.logging.
"""

import logging
import os
import shutil
import tempfile
import unittest

from ldapinit import logging as ll


class LoggingTest(unittest.TestCase):
    """Tests for ldapinit.logging"""

    def setUp(self):
        self.root = tempfile.mkdtemp()
        self.level = logging.getLogger('ldapinit').level
        self.root_level = logging.getLogger().level

    def tearDown(self):
        logging.getLogger('ldapinit').setLevel(self.level)
        logging.getLogger('ldapinit.slapd').setLevel(logging.NOTSET)
        logging.getLogger().setLevel(self.root_level)
        if self.root and os.path.isdir(self.root):
            shutil.rmtree(self.root)

    def test_load_packaged_conf(self):
        """Test packaged logging configurations."""
        for name in ['daemon.json', 'cli.json']:
            conf = ll.load_logging_conf(name)
            self.assertEqual(conf['version'], 1)
            self.assertIn('ldapinit', conf['loggers'])

    def test_load_conf_path(self):
        """Test logging configuration given as path."""
        path = os.path.join(self.root, 'custom.json')
        with open(path, 'w') as f:
            f.write('{"version": 1, "loggers": {}}')

        self.assertEqual(ll.load_logging_conf(path),
                         {'version': 1, 'loggers': {}})

    def test_set_log_level(self):
        """Test level applied to ldapinit loggers."""
        logging.getLogger('ldapinit.slapd')
        ll.set_log_level(logging.DEBUG)

        self.assertEqual(logging.getLogger('ldapinit').level, logging.DEBUG)
        self.assertEqual(logging.getLogger('ldapinit.slapd').level,
                         logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
