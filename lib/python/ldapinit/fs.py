"""File system utilities such as making dirs and writing files atomically.
"""

import errno
import logging
import os
import tempfile

_LOGGER = logging.getLogger(__name__)


def rm_safe(path):
    """Removes file, ignoring the error if file does not exist.

    :return ``Bool``:
        ``True`` - if the file was removed.
    """
    try:
        os.unlink(path)
        return True
    except OSError as err:
        # If the file does not exists, it is not an error
        if err.errno == errno.ENOENT:
            return False
        else:
            raise


def mkdir_safe(path, mode=0o777):
    """Creates directory, if there is any error, aborts the process.

    :param ``str`` path:
        Path to the directory to create. All intermediary folders will be
        created.
    :return ``Bool``:
        ``True`` - if the directory was created.
        ``False`` - if the directory already existed.
    """
    try:
        os.makedirs(path, mode=mode)
        return True
    except OSError as err:
        # If dir already exists, no problem. Otherwise raise
        if err.errno == errno.EEXIST and os.path.isdir(path):
            return False
        else:
            raise


def write_safe(filename, func, mode='wb', prefix='tmp', permission=None):
    """Safely write file.

    The content is written to a temporary file in the same directory and
    renamed over the target, readers never see a partial file.

    :param filename:
        full path of file
    :param func:
        what to do with the file descriptor, signature func(fd)
    :param mode:
        same as tempfile.NamedTemporaryFile
    :param prefix:
        same as tempfile.NamedTemporaryFile
    :param permission:
        file permission
    """
    dirname = os.path.dirname(filename)
    mkdir_safe(dirname)

    tmpfile = tempfile.NamedTemporaryFile(dir=dirname,
                                          delete=False,
                                          prefix=prefix,
                                          mode=mode)
    try:
        with tmpfile:
            if permission is not None:
                os.fchmod(tmpfile.fileno(), permission)

            func(tmpfile)

        os.replace(tmpfile.name, filename)
    finally:
        rm_safe(tmpfile.name)

    _LOGGER.debug('Wrote: %s', filename)
