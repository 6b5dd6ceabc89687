"""Render templates."""

import jinja2

from ldapinit import fs


def render_template(templatename, **kwargs):
    """This renders a JINJA template to a string.

    The templates exist in our lib/python/ldapinit/templates directory.

    :param ``str`` templatename:
        The name of the template file.
    :param ``dict`` kwargs:
        key/value passed into the template.
    """
    jinja_env = jinja2.Environment(
        loader=jinja2.PackageLoader('ldapinit'),
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    return jinja_env.get_template(templatename).render(**kwargs)


def create_file(filename, templatename, mode=0o644, **kwargs):
    """This Creates a file from a JINJA template.

    :param ``str`` filename:
        Name of the file to generate.
    :param ``str`` templatename:
        The name of the template file.
    :param ``int`` mode:
        The mode for the file.
    :param ``dict`` kwargs:
        key/value passed into the template.
    """
    data = render_template(templatename, **kwargs)
    fs.write_safe(
        filename,
        lambda f: f.write(data),
        mode='w',
        permission=mode,
    )
