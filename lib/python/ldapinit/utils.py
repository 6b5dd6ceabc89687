"""Useful utility functions.
"""

import logging
import os
import resource
import signal


_LOGGER = logging.getLogger(__name__)


# List of signals that can be manipulated
_SIGNALS = (set(range(1, signal.NSIG)) -
            {signal.SIGKILL, signal.SIGSTOP, 32, 33})


def _rlimit(u_type):
    """Map ulimit resource name to its rlimit constant, nofile => NOFILE.
    """
    type_name = 'RLIMIT_{}'.format(u_type.upper())
    return getattr(resource, type_name)


def get_ulimit(u_type):
    """get ulimit value
    resource type name nofile => RLIMIT_NOFILE
    return tuple of (soft_limit, hard_limit)
    """
    return resource.getrlimit(_rlimit(u_type))


def set_ulimit(u_type, limit):
    """Set both soft and hard ulimit, the same way `ulimit -n` does.

    :param ``str`` u_type:
        Resource type name, e.g. ``nofile``.
    :param ``int`` limit:
        New soft and hard limit.
    :return ``Bool``:
        ``True`` - if the limit was applied.
        ``False`` - if the kernel refused it, the current limit is kept.
    """
    try:
        resource.setrlimit(_rlimit(u_type), (limit, limit))
    except (ValueError, OSError) as err:
        _LOGGER.warning(
            'Unable to set %s limit to %d (current: %r): %s',
            u_type, limit, get_ulimit(u_type), err
        )
        return False

    _LOGGER.debug('%s limit set to %d', u_type, limit)
    return True


def restore_signals():
    """Reset the default behavior to all signals.
    """
    for i in _SIGNALS:
        signal.signal(i, signal.SIG_DFL)


def sane_execvp(filename, args, signals=True):
    """Execute a new program with sanitized environment.
    """
    if signals:
        restore_signals()
    os.execvp(filename, args)
