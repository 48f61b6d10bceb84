"""PyenvRuntime: pins a Python version and builds the project's virtualenv."""

import os

VENV_DIR = ".venv"


def venv_python(project_dir):
    return os.path.join(project_dir, VENV_DIR, "bin", "python")


class PyenvRuntime:
    """Wraps the pyenv and pip calls made while provisioning a project."""

    def __init__(self, runner):
        self._runner = runner

    def global_version(self) -> str:
        """Return the first version printed by ``pyenv global``, or "" if none."""
        result = self._runner.capture(
            "pyenv", ["global"], "Failed to read the pyenv global version",
        )
        for line in result.stdout.splitlines():
            if line.strip():
                return line.strip()
        return ""

    def pin(self, version, project_dir):
        """Write .python-version into project_dir via ``pyenv local``."""
        self._runner.run(
            "pyenv", ["local", version],
            f"Failed to pin Python {version} (is it installed? try: pyenv install {version})",
            cwd=project_dir,
        )

    def create_venv(self, project_dir):
        self._runner.run(
            "pyenv", ["exec", "python", "-m", "venv", VENV_DIR],
            "Failed to create the virtual environment",
            cwd=project_dir,
        )

    def install_requirements(self, project_dir, manifest):
        self._runner.run(
            venv_python(project_dir), ["-m", "pip", "install", "-r", manifest],
            f"Failed to install dependencies from {manifest}",
            cwd=project_dir,
        )
