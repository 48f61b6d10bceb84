"""GitRepository: the git commands that initialize and publish a new project.

All commands go through an injected CommandRunner and run inside the
project's working tree.
"""

import configparser
import os
import sys

import git
from git.config import get_config_path

DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"
INITIAL_COMMIT_MESSAGE = "Initial commit"


def ambient_user_name() -> str:
    """Return user.name from the user's git config, or "" when it is unset.

    Reads the files git itself uses for global settings through GitPython
    without spawning git: ``$GIT_CONFIG_GLOBAL`` when set, otherwise the XDG
    config and ``~/.gitconfig``. Missing files are skipped. An unparsable
    config is reported as a warning and treated as unset.
    """
    override = os.environ.get("GIT_CONFIG_GLOBAL")
    if override:
        config_files = [os.path.expanduser(override)]
    else:
        config_files = [get_config_path("user"), get_config_path("global")]
    reader = git.GitConfigParser(config_files, read_only=True)
    try:
        return str(reader.get_value("user", "name", ""))
    except configparser.Error as e:
        print(f"Warning: Could not read git user.name: {e}", file=sys.stderr)
        return ""


class GitRepository:
    """Runs git commands in a single working tree.

    Args:
        runner: A CommandRunner (or FakeCommandRunner in tests).
        working_tree_dir: Directory the repository lives in.
    """

    def __init__(self, runner, working_tree_dir):
        self._runner = runner
        self._working_tree_dir = working_tree_dir

    @property
    def working_tree_dir(self):
        return self._working_tree_dir

    def init(self):
        self._git(["init", "--quiet"], "Failed to initialize git repository")

    def set_default_branch(self, branch=DEFAULT_BRANCH):
        """Point HEAD at branch. Works before the first commit exists."""
        self._git(
            ["symbolic-ref", "HEAD", f"refs/heads/{branch}"],
            f"Failed to rename the default branch to {branch}",
        )

    def add_all(self):
        self._git(["add", "-A"], "Failed to stage project files")

    def commit(self, message=INITIAL_COMMIT_MESSAGE):
        self._git(["commit", "--quiet", "-m", message], "Failed to create the initial commit")

    def add_remote(self, url, name=DEFAULT_REMOTE):
        self._git(["remote", "add", name, url], f"Failed to add remote {name} ({url})")

    def push(self, branch=DEFAULT_BRANCH, remote=DEFAULT_REMOTE):
        self._git(["push", "-u", remote, branch], f"Failed to push {branch} to {remote}")

    def _git(self, args, failure_message):
        return self._runner.run("git", args, failure_message, cwd=self._working_tree_dir)
