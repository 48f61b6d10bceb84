"""Render the Jinja2 starter-file templates shipped inside mkproj packages."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Return the text of ``<package>.templates/<template_name>`` filled in with kwargs.

    Rendering is strict: a template that references a variable the caller
    did not pass raises jinja2.UndefinedError rather than leaving a blank
    in a generated README or LICENSE. The file's final newline is kept so
    generated files end the way the template does.

    Raises:
        FileNotFoundError: No such template in the package.
    """
    source = (
        importlib.resources.files(f"{package}.templates")
        .joinpath(template_name)
        .read_text(encoding="utf-8")
    )
    environment = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    return environment.from_string(source).render(**kwargs)
