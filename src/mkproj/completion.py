"""Generate shell completion scripts for the mkproj CLI."""

import click
from click.shell_completion import get_completion_class

SHELLS = ("bash", "zsh", "fish")


def _print_installation_help():
    click.echo("Generate shell completion scripts.")
    click.echo()
    click.echo(f"Supported shells: {', '.join(SHELLS)}")
    click.echo()
    click.echo("To install, add to your shell config:")
    click.echo('  eval "$(mkproj completion zsh)"')
    click.echo()
    click.echo("Project types and project names complete from your mkproj config.")


@click.command("completion")
@click.argument("shell", type=click.Choice(SHELLS), required=False)
@click.pass_context
def completion(ctx, shell):
    """Generate shell completion scripts."""
    if shell is None:
        _print_installation_help()
        return
    root = ctx.find_root()
    prog_name = root.info_name
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.UsageError(f"Unsupported shell: {shell}")
    comp = comp_cls(
        cli=root.command, ctx_args={}, prog_name=prog_name,
        complete_var=f"_{prog_name.replace('-', '_').upper()}_COMPLETE",
    )
    click.echo(comp.source())
