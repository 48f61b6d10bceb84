"""Top-level Click group for the mkproj CLI."""

import click

from mkproj.completion import completion
from mkproj.config import CONFIG_ENV_VAR, default_config_path
from mkproj.protect_cmd.cli import protect_cmd
from mkproj.scaffold.cli import new_cmd
from mkproj.types_cmd.cli import path_cmd, types_cmd


@click.group()
@click.option("--config", "config_path", envvar=CONFIG_ENV_VAR, default=default_config_path,
              metavar="PATH", help=f"Config file with project types (env: {CONFIG_ENV_VAR})")
@click.pass_context
def main(ctx, config_path):
    """mkproj - scaffold new projects with git, pyenv and gh."""
    ctx.obj = config_path


main.add_command(new_cmd)
main.add_command(protect_cmd)
main.add_command(types_cmd)
main.add_command(path_cmd)
main.add_command(completion)
