"""ldapinit logging helpers.
"""

import io
import json
import logging
import os

_PACKAGE_ROOT = __name__.split('.', 1)[0]


def set_log_level(log_level):
    """Set loglevel for all ldapinit modules
    """
    # pylint: disable=consider-iterating-dictionary
    # yes, we need to iterate keys
    logger_keys = [
        lk for lk in logging.Logger.manager.loggerDict.keys()
        if lk == _PACKAGE_ROOT or lk.startswith(_PACKAGE_ROOT + '.')
    ]

    logging.getLogger().setLevel(log_level)
    logging.getLogger(_PACKAGE_ROOT).setLevel(log_level)
    for logger_key in logger_keys:
        logging.getLogger(logger_key).setLevel(log_level)


def load_logging_conf(name):
    """Load logging config json file.

    An absolute or relative path is used as is, otherwise the name is
    looked up in the ldapinit/logging package directory.
    """
    if os.path.exists(name):
        logconf_path = name
    else:
        logconf_path = os.path.join(os.path.dirname(__file__), name)

    with io.open(logconf_path) as f:
        return json.loads(f.read())
