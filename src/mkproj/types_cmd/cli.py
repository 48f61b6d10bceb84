"""Click commands for inspecting and navigating the project-type registry."""

import os

import click
from click.shell_completion import CompletionItem

from mkproj.config import CONFIG_ENV_VAR, default_config_path, load_config
from mkproj.errors import MkprojError, ValidationError, exit_on_failure


def _completion_config(ctx):
    config_path = (
        ctx.find_root().params.get("config_path")
        or os.environ.get(CONFIG_ENV_VAR)
        or default_config_path()
    )
    try:
        return load_config(config_path)
    except MkprojError:
        return None


def complete_project_type(ctx, param, incomplete):
    """Shell completion for project type names."""
    config = _completion_config(ctx)
    if config is None:
        return []
    return [
        CompletionItem(name, help=base_dir)
        for name, base_dir in config.registry.items()
        if name.startswith(incomplete)
    ]


def complete_project_name(ctx, param, incomplete):
    """Shell completion for existing project directories of the chosen type."""
    config = _completion_config(ctx)
    base_dir = config.registry.get(ctx.params.get("project_type")) if config else None
    if not base_dir or not os.path.isdir(base_dir):
        return []
    return [
        CompletionItem(entry)
        for entry in sorted(os.listdir(base_dir))
        if entry.startswith(incomplete) and os.path.isdir(os.path.join(base_dir, entry))
    ]


@click.command("types")
@click.pass_obj
def types_cmd(config_path):
    """List the configured project types and their base directories."""
    with exit_on_failure():
        config = load_config(config_path)
    if not config.registry:
        click.echo(f"No project types configured in {config_path}", err=True)
        return
    width = max(len(name) for name in config.registry)
    for name, base_dir in config.registry.items():
        missing = "" if os.path.isdir(base_dir) else "  (missing)"
        click.echo(f"{name.ljust(width)}  {base_dir}{missing}")


@click.command("path")
@click.argument("project_type", shell_complete=complete_project_type)
@click.argument("name", required=False, shell_complete=complete_project_name)
@click.pass_obj
def path_cmd(config_path, project_type, name):
    """Print the directory of a project type, or of a project within it.

    Use from the shell to navigate: cd "$(mkproj path research my-project)"
    """
    with exit_on_failure():
        base_dir = load_config(config_path).registry.base_dir(project_type)
        directory = os.path.join(base_dir, name) if name else base_dir
        if not os.path.isdir(directory):
            raise ValidationError(f"Directory not found: {directory}")
    click.echo(directory)
