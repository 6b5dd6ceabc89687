"""Safely invoke external binaries.
"""

import functools
import io
import json
import logging
import os
import subprocess
from subprocess import CalledProcessError

from ldapinit import utils


_LOGGER = logging.getLogger(__name__)

_EXECUTABLES = None
_ALIASES_ENV = 'LDAPINIT_ALIASES_PATH'


class CommandAliasError(Exception):
    """Error raised if alises can't be resolved.
    """


def load_aliases(aliases_path):
    """Load aliases from file."""
    global _EXECUTABLES  # pylint: disable=W0603
    with io.open(aliases_path) as f:
        _EXECUTABLES = json.loads(f.read())


def get_aliases():
    """Load aliases of external binaries that can invoked.

    Aliases come from the JSON file named by LDAPINIT_ALIASES_PATH, or
    from the built-in bootstrap aliases.
    """
    global _EXECUTABLES  # pylint: disable=W0603
    if _EXECUTABLES is None:
        if os.environ.get(_ALIASES_ENV):
            load_aliases(os.environ[_ALIASES_ENV])
        else:
            from ldapinit.bootstrap import aliases
            _EXECUTABLES = dict(aliases.ALIASES)

    return _EXECUTABLES


def _check(path):
    """Check that path exists and is executable."""
    if path is None:
        return False

    return os.access(path, os.X_OK)


@functools.lru_cache(maxsize=64)
def resolve(exe):
    """Resolve logical name to full path."""
    if os.path.isabs(exe):
        return exe

    executables = get_aliases()

    if not executables.get(exe):
        _LOGGER.debug('Not in aliases: %s', exe)
        return None

    safe_exe = executables[exe]

    if isinstance(safe_exe, list):
        for choice in safe_exe:
            choice = os.path.normpath(choice)
            if _check(choice):
                return choice
        _LOGGER.debug('Cannot resolve: %s', exe)
        return None
    else:
        safe_exe = os.path.normpath(safe_exe)
        if not _check(safe_exe):
            _LOGGER.debug('Command not found: %s, %s', exe, safe_exe)
            return None

    return safe_exe


def _resolve(exe):
    """Resolve alias, raise exception if not found."""
    resolved = resolve(exe)
    if not resolved:
        raise CommandAliasError('Unable to resolve: {}'.format(exe))
    return resolved


def _alias_command(cmdline):
    """Checks that the command line is in the aliases."""
    safe_cmdline = list(cmdline)
    safe_cmdline.insert(0, _resolve(safe_cmdline.pop(0)))
    return safe_cmdline


def _loggable(cmdline, sensitive):
    """Command line fit for the logs, arguments elided if sensitive."""
    if sensitive:
        return [cmdline[0], '...']
    return cmdline


def check_call(cmdline, **kwargs):
    """Runs command wrapping subprocess.check_call.

    :param cmdline:
        Command to run, the first element an alias
    :type cmdline:
        ``list``
    """
    args = _alias_command(cmdline)
    _LOGGER.debug('check_call: %r', args)

    try:
        rc = subprocess.check_call(args, close_fds=True, **kwargs)
        _LOGGER.debug('Finished, rc: %d', rc)
        return rc
    except CalledProcessError as exc:
        _LOGGER.error('Command failed: %r, rc: %d', args, exc.returncode)
        raise


def check_output(cmdline, sensitive=False, **kwargs):
    """Runs command wrapping subprocess.check_output, returns decoded output.

    :param cmdline:
        Command to run, the first element an alias
    :type cmdline:
        ``list``
    :param sensitive:
        *optional* Command line carries secrets, do not log arguments
    :type sensitive:
        ``bool``
    """
    args = _alias_command(cmdline)
    _LOGGER.debug('check_output: %r', _loggable(args, sensitive))

    try:
        res = subprocess.check_output(args, close_fds=True, **kwargs)
        _LOGGER.debug('Finished.')
    except CalledProcessError as exc:
        _LOGGER.error('Command failed: %r, rc: %d',
                      _loggable(args, sensitive), exc.returncode)
        raise

    return res.decode()


def safe_exec(cmd, restore_signals=True):
    """Exec command line using os.execvp.
    """
    safe_cmd = _alias_command(cmd)
    _LOGGER.debug('safe_exec: %r', safe_cmd)

    utils.sane_execvp(
        safe_cmd[0], safe_cmd,
        signals=restore_signals
    )


__all__ = [
    'CalledProcessError',
    'CommandAliasError',
    'check_call',
    'check_output',
    'get_aliases',
    'resolve',
    'safe_exec',
]
