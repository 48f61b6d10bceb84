"""Write the directory tree and starter files of a new project."""

import datetime
import os
import shutil

from mkproj.templates.template_renderer import render_template

SUBDIRECTORIES = ("scripts", "output", "data", "notebooks")
LICENSE_HOLDER_PLACEHOLDER = "<COPYRIGHT HOLDER>"

DEFAULT_GITIGNORE = """\
.venv/
__pycache__/
*.py[cod]
.ipynb_checkpoints/
.env
.DS_Store
"""

_TEMPLATE_PACKAGE = __package__


def create_directory_tree(target_dir):
    """Create target_dir and its fixed subdirectories.

    Raises:
        FileExistsError: If target_dir already exists.
    """
    os.makedirs(target_dir)
    for subdir in SUBDIRECTORIES:
        os.mkdir(os.path.join(target_dir, subdir))


def write_readme(target_dir, name):
    content = render_template("README.md.j2", package=_TEMPLATE_PACKAGE, name=name)
    _write(os.path.join(target_dir, "README.md"), content)


def write_gitignore(target_dir, template_path=None):
    """Copy the .gitignore template into target_dir.

    Falls back to DEFAULT_GITIGNORE when no template is configured or the
    configured file does not exist.

    Returns:
        True if the template was copied, False if the default was written.
    """
    destination = os.path.join(target_dir, ".gitignore")
    if template_path and os.path.isfile(template_path):
        shutil.copyfile(template_path, destination)
        return True
    _write(destination, DEFAULT_GITIGNORE)
    return False


def write_license(target_dir, holder, year=None):
    year = year or datetime.date.today().year
    content = render_template(
        "LICENSE.j2", package=_TEMPLATE_PACKAGE, year=year, holder=holder,
    )
    _write(os.path.join(target_dir, "LICENSE"), content)


def resolve_license_holder(override, configured, ambient_lookup):
    """Pick the copyright holder for LICENSE.

    Order: explicit override, configured default, ambient git identity
    (ambient_lookup() -> str), then LICENSE_HOLDER_PLACEHOLDER.
    """
    for candidate in (override, configured):
        if candidate and candidate.strip():
            return candidate.strip()
    ambient = ambient_lookup()
    if ambient and ambient.strip():
        return ambient.strip()
    return LICENSE_HOLDER_PLACEHOLDER


def _write(path, content):
    with open(path, "w") as f:
        f.write(content)
