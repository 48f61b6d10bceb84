"""Click command for the project scaffolding workflow."""

import click

from mkproj.config import load_config
from mkproj.errors import exit_on_failure
from mkproj.scaffold.command_runner import CommandRunner
from mkproj.scaffold.editor import launch_editor
from mkproj.scaffold.project_scaffolding import ProjectScaffolder
from mkproj.scaffold.scaffold_opts import ProjectSpec, RemoteMode
from mkproj.types_cmd.cli import complete_project_type


@click.command("new")
@click.argument("name")
@click.option("--type", "project_type", required=True, shell_complete=complete_project_type,
              help="Project type; selects the base directory from the config file")
@click.option("--github", "remote", metavar="public|private|URL",
              help="Create a public or private GitHub repository and push, or add URL as origin")
@click.option("--open", "open_editor", is_flag=True,
              help="Open the new project in your editor when done")
@click.option("--python", "python_version", metavar="VERSION",
              help="Python version to pin (default: pyenv global version)")
@click.option("--requirements", metavar="FILE",
              help="Requirements file to install into the new virtualenv")
@click.option("--license", "with_license", is_flag=True,
              help="Add an MIT LICENSE file")
@click.option("--author", "license_holder", metavar="NAME",
              help="Copyright holder for LICENSE (default: config, then git user.name)")
@click.pass_obj
def new_cmd(config_path, name, project_type, remote, **kwargs):
    """Create a new project with git, a pinned Python and a virtualenv."""
    with exit_on_failure():
        spec = ProjectSpec(
            name=name,
            project_type=project_type,
            remote=RemoteMode.parse(remote),
            **kwargs,
        )
        scaffolder = ProjectScaffolder(
            load_config(config_path),
            CommandRunner(),
            editor_launcher=launch_editor,
        )
        scaffolder.create(spec)
