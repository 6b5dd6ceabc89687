"""ldapinit command line helpers.
"""

import functools
import importlib
import logging
import logging.config
import os
import pkgutil
import sys
import tempfile
import traceback

import click

from ldapinit import bootstrap
from ldapinit import exc
from ldapinit import logging as ll


__path__ = pkgutil.extend_path(__path__, __name__)

EXIT_CODE_DEFAULT = 1


def init_logger(name):
    """Initialize logger.
    """
    try:
        # logging configuration files in json format
        conf = ll.load_logging_conf(name)
        logging.config.dictConfig(conf)
    except (IOError, OSError, ValueError):
        with tempfile.NamedTemporaryFile(delete=False, mode='w') as f:
            traceback.print_exc(file=f)
            click.echo('Unable to load log conf: %s [ %s ]' % (name, f.name),
                       err=True)


def make_commands(module_name):
    """Make a Click multicommand from all submodules of the module."""

    class MCommand(click.Group):
        """ldapinit CLI driver."""

        def list_commands(self, ctx):
            """Return list of commands in section."""
            climod = importlib.import_module(module_name)
            commands = set()
            for path in climod.__path__:
                for filename in os.listdir(path):
                    if filename in ['__init__.py', '__pycache__']:
                        continue

                    if filename.endswith('.py'):
                        commands.add(filename[:-3])

                    if os.path.isdir(os.path.join(path, filename)):
                        commands.add(filename)

            return sorted([cmd.replace('_', '-') for cmd in commands])

        def get_command(self, ctx, cmd_name):
            """Return dymanically constructed command."""
            full_name = '.'.join([module_name, cmd_name.replace('-', '_')])
            try:
                mod = importlib.import_module(full_name)
            except ImportError as import_err:
                if import_err.name != full_name:
                    print(
                        'dependency error: {}:{} - {}'.format(
                            module_name, cmd_name, str(import_err)
                        ),
                        file=sys.stderr
                    )
                return None
            return mod.init()

    return MCommand


def out(string, *args):
    """Print to stdout."""
    if args:
        string = string % args

    click.echo(string)


def handle_exceptions(exclist):
    """Decorator that will handle exceptions and output friendly messages.

    Handled exceptions exit with their ``exit_code`` attribute when they
    carry one, EXIT_CODE_DEFAULT otherwise.
    """

    def wrap(f):
        """Returns decorator that wraps/handles exceptions."""
        def wrapped_f(handlers, *args, **kwargs):
            """Wrapped function, outermost handler first."""
            if not handlers:
                return f(*args, **kwargs)
            else:
                exc_type, handler = handlers[0]

                try:
                    return wrapped_f(handlers[1:], *args, **kwargs)
                except exc_type as err:
                    if isinstance(handler, str):
                        click.echo(handler, err=True)
                    elif handler is None:
                        click.echo(str(err), err=True)
                    else:
                        click.echo(handler(err), err=True)

                    sys.exit(getattr(err, 'exit_code', EXIT_CODE_DEFAULT))

        @functools.wraps(f)
        def _handle_any(*args, **kwargs):
            """Default exception handler."""
            try:
                return wrapped_f(list(exclist), *args, **kwargs)

            except click.UsageError as usage_err:
                click.echo('Usage error: %s' % str(usage_err), err=True)
                sys.exit(EXIT_CODE_DEFAULT)

            except Exception as unhandled:  # pylint: disable=W0703
                with tempfile.NamedTemporaryFile(delete=False, mode='w') as f:
                    traceback.print_exc(file=f)
                    click.echo('Error: %s [ %s ]' % (unhandled, f.name),
                               err=True)

                sys.exit(EXIT_CODE_DEFAULT)

        return _handle_any

    return wrap


def _invalid_input(err):
    """Format invalid input error."""
    return '>>> {}'.format(err.message)


ON_EXCEPTIONS = handle_exceptions([
    (exc.InvalidInputError, _invalid_input),
    (exc.ToolError, None),
])


def bootstrap_options(func):
    """Options shared by commands building the bootstrap configuration."""
    options = [
        click.option('--password-file', envvar='SLAPD_PASSWORD_FILE',
                     help='File holding the initial admin password.'),
        click.option('--domain', envvar='SLAPD_DOMAIN',
                     help='Domain name, e.g. example.com.'),
        click.option('--organization', envvar='SLAPD_ORGANIZATION',
                     help='Organization name.'),
        click.option('--admin-user', envvar='SLAPD_ADMIN_USER',
                     help='Admin DN, defaults to cn=admin,<suffix>.'),
        click.option('--tls-enabled', envvar='SLAPD_TLS_ENABLED',
                     help='Enable TLS when set to any value.'),
        click.option('--defaults', envvar='SLAPD_BOOTSTRAP_DEFAULTS',
                     type=click.Path(exists=True, dir_okay=False),
                     help='YAML file overriding layout defaults.'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def make_layout(defaults):
    """Interpolated layout, YAML overrides applied if given."""
    overrides = None
    if defaults:
        overrides = bootstrap.load_overrides(defaults)
    return bootstrap.layout(overrides)
