"""ProjectScaffolder: creates a new project by sequencing git, pyenv and gh calls.

The workflow is a fixed sequence of stages. Each stage either succeeds or
raises, and the first failure ends the run. Nothing created by earlier
stages is rolled back: a failure after Materialize leaves a partially
created project directory behind for the user to inspect or delete.
"""

import os
import shutil
import sys
from enum import Enum

from mkproj.errors import ExecutionError, ValidationError
from mkproj.scaffold.git_repository import DEFAULT_BRANCH, GitRepository, ambient_user_name
from mkproj.scaffold.github_client import GitHubClient
from mkproj.scaffold.project_files import (
    create_directory_tree,
    resolve_license_holder,
    write_gitignore,
    write_license,
    write_readme,
)
from mkproj.scaffold.python_runtime import VENV_DIR, PyenvRuntime
from mkproj.scaffold.scaffold_opts import RemoteKind, ResolvedProject

REQUIRED_TOOLS = ("git", "pyenv")
REMOTE_CREATION_TOOL = "gh"


class Stage(Enum):
    VALIDATE = "Validating project"
    MATERIALIZE = "Creating project files"
    INIT_VCS = "Initializing git repository"
    PROVISION_RUNTIME = "Provisioning Python runtime"
    INSTALL_DEPENDENCIES = "Installing dependencies"
    COMMIT = "Creating initial commit"
    LINK_REMOTE = "Linking remote repository"
    FINISH = "Finishing"


def tool_on_path(name: str) -> bool:
    return shutil.which(name) is not None


class ProjectScaffolder:
    """Orchestrates project creation using injected dependencies.

    Args:
        config: MkprojConfig holding the project-type registry.
        runner: CommandRunner used for every external tool invocation.
        tool_available: Callable(name) -> bool reporting whether a tool is on PATH.
        editor_launcher: Callable(directory) started after success when the
            spec asks for it. None disables editor launching.
        identity_lookup: Callable() -> str returning the ambient git user name.
    """

    def __init__(
        self, config, runner, *,
        tool_available=tool_on_path,
        editor_launcher=None,
        identity_lookup=ambient_user_name,
    ):
        self._config = config
        self._runner = runner
        self._tool_available = tool_available
        self._editor_launcher = editor_launcher
        self._identity_lookup = identity_lookup
        self._runtime = PyenvRuntime(runner)
        self._github = GitHubClient(runner)
        self.stage = None
        self.completed_stages = []

    def create(self, spec) -> ResolvedProject:
        """Run every stage for spec and return the resolved project.

        Raises:
            ValidationError: From the Validate stage, before any side effect.
            ExecutionError: From any later stage whose tool exits non-zero.
        """
        self._enter(Stage.VALIDATE)
        project = self.validate(spec)
        self.completed_stages.append(Stage.VALIDATE)

        git_repo = GitRepository(self._runner, project.target_dir)
        for stage, step in self._pipeline(project, git_repo):
            self._enter(stage)
            step()
            self.completed_stages.append(stage)

        self._enter(Stage.FINISH)
        self._finish(project)
        self.completed_stages.append(Stage.FINISH)
        return project

    def validate(self, spec) -> ResolvedProject:
        """Check a ProjectSpec and resolve paths and the Python version.

        Makes no changes to the filesystem. Reading ``pyenv global`` is the
        only external call.
        """
        _validate_name(spec.name)

        base_dir = self._config.registry.base_dir(spec.project_type)
        if not os.path.isdir(base_dir):
            raise ValidationError(
                f"Base directory for project type '{spec.project_type}' does not exist: {base_dir}"
            )

        requirements = None
        if spec.requirements:
            requirements = os.path.abspath(os.path.expanduser(spec.requirements))
            if not os.path.isfile(requirements):
                raise ValidationError(f"Requirements file not found: {spec.requirements}")

        target_dir = os.path.join(base_dir, spec.name)
        if os.path.lexists(target_dir):
            raise ValidationError(f"Directory already exists: {target_dir}")

        self._check_tools(spec.remote)

        python_version = (spec.python_version or "").strip() or self._runtime.global_version()
        if not python_version:
            raise ValidationError(
                "No Python version given and pyenv has no global version set "
                "(pass --python or run: pyenv global <version>)"
            )

        return ResolvedProject(
            spec=spec,
            base_dir=base_dir,
            python_version=python_version,
            requirements=requirements,
        )

    def _check_tools(self, remote):
        required = list(REQUIRED_TOOLS)
        if remote.creates_repository:
            required.append(REMOTE_CREATION_TOOL)
        missing = [tool for tool in required if not self._tool_available(tool)]
        if missing:
            raise ValidationError(f"Required tools not found on PATH: {', '.join(missing)}")

    def _pipeline(self, project, git_repo):
        stages = [
            (Stage.MATERIALIZE, lambda: self._materialize(project)),
            (Stage.INIT_VCS, lambda: self._init_vcs(git_repo)),
            (Stage.PROVISION_RUNTIME, lambda: self._provision_runtime(project)),
        ]
        if project.requirements:
            stages.append((Stage.INSTALL_DEPENDENCIES, lambda: self._install_dependencies(project)))
        stages.append((Stage.COMMIT, lambda: self._commit(git_repo)))
        if project.spec.remote.kind is not RemoteKind.NONE:
            stages.append((Stage.LINK_REMOTE, lambda: self._link_remote(project, git_repo)))
        return stages

    def _materialize(self, project):
        try:
            self._write_project_files(project)
        except OSError as e:
            raise ExecutionError(
                f"Failed to create project files in {project.target_dir}", str(e),
            ) from e

    def _write_project_files(self, project):
        create_directory_tree(project.target_dir)
        write_readme(project.target_dir, project.name)
        if not write_gitignore(project.target_dir, self._config.gitignore_template):
            print("  No .gitignore template found, using the built-in default")
        if project.spec.with_license:
            holder = resolve_license_holder(
                project.spec.license_holder,
                self._config.license_holder,
                self._identity_lookup,
            )
            write_license(project.target_dir, holder)

    def _init_vcs(self, git_repo):
        git_repo.init()
        git_repo.set_default_branch(DEFAULT_BRANCH)

    def _provision_runtime(self, project):
        print(f"  Using Python {project.python_version}")
        self._runtime.pin(project.python_version, project.target_dir)
        self._runtime.create_venv(project.target_dir)

    def _install_dependencies(self, project):
        self._runtime.install_requirements(project.target_dir, project.requirements)

    def _commit(self, git_repo):
        git_repo.add_all()
        git_repo.commit()

    def _link_remote(self, project, git_repo):
        remote = project.spec.remote
        if remote.creates_repository:
            self._github.create_repo(project.name, remote.visibility, cwd=project.target_dir)
            git_repo.push(DEFAULT_BRANCH)
        else:
            git_repo.add_remote(remote.url)

    def _finish(self, project):
        print(f"\nCreated {project.name} in {project.target_dir}")
        print("Next steps:")
        print(f"  cd {project.target_dir}")
        print(f"  source {VENV_DIR}/bin/activate")
        if project.spec.remote.kind is RemoteKind.EXISTING_URL:
            print(f"  git push -u origin {DEFAULT_BRANCH}")

        if project.spec.open_editor and self._editor_launcher is not None:
            try:
                self._editor_launcher(project.target_dir)
            except OSError as e:
                print(f"Warning: Could not launch editor: {e}", file=sys.stderr)

    def _enter(self, stage):
        self.stage = stage
        if stage is not Stage.FINISH:
            print(f"==> {stage.value}")


def _validate_name(name):
    if not name or not name.strip():
        raise ValidationError("Project name must not be empty")
    if name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
        raise ValidationError(f"Invalid project name '{name}': must be a single directory name")
