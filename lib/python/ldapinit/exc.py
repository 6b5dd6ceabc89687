"""ldapinit exceptions.
"""

import logging

_LOGGER = logging.getLogger(__name__)


class LdapInitError(Exception):
    """Base class for all ldapinit errors"""

    pass


class InvalidInputError(LdapInitError):
    """Fatal error, indicating missing or malformed configuration input."""

    def __init__(self, source, msg):
        self.source = source
        self.message = msg
        super(InvalidInputError, self).__init__()

    def __str__(self):
        return '{}: {}'.format(self.source, self.message)


class ToolError(LdapInitError):
    """Fatal error, raised when an external OpenLDAP tool fails.

    The command line is deliberately not kept, it may hold the plaintext
    admin password.
    """

    def __init__(self, tool, returncode, output=None):
        self.tool = tool
        self.returncode = returncode
        self.output = output
        super(ToolError, self).__init__()

    @property
    def exit_code(self):
        """Process exit code to propagate."""
        if self.returncode and self.returncode > 0:
            return self.returncode
        return 1

    def __str__(self):
        return '{} failed, rc: {}'.format(self.tool, self.returncode)
