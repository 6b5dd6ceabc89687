"""ldapinit.cli tests.
"""
