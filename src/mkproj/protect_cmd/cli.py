"""Click command for applying branch protection to a GitHub repository."""

import click

from mkproj.errors import exit_on_failure
from mkproj.scaffold.command_runner import CommandRunner
from mkproj.scaffold.github_client import DEFAULT_PROTECTED_BRANCH, GitHubClient


@click.command("protect")
@click.argument("owner")
@click.argument("repo")
@click.option("--branch", default=DEFAULT_PROTECTED_BRANCH, show_default=True,
              help="Branch to protect")
def protect_cmd(owner, repo, branch):
    """Require pull requests (zero approvals) on a branch, admins included."""
    with exit_on_failure():
        GitHubClient(CommandRunner()).protect_branch(owner, repo, branch)
    click.echo(f"Protected {owner}/{repo} branch {branch}")
