"""Shared fixtures for scaffolding tests."""

import os
import sys

import pytest

from mkproj.config import MkprojConfig, ProjectTypeRegistry
from mkproj.scaffold.project_scaffolding import ProjectScaffolder

# Ensure tests/scaffold/ is on sys.path so test files can import
# fake_command_runner unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402

GLOBAL_PYTHON = "3.12.4"


@pytest.fixture
def base_dir(tmp_path):
    """An existing base directory registered as the 'research' project type."""
    path = tmp_path / "research"
    path.mkdir()
    return str(path)


@pytest.fixture
def config(base_dir):
    return MkprojConfig(registry=ProjectTypeRegistry({"research": base_dir}))


@pytest.fixture
def runner():
    fake = FakeCommandRunner()
    fake.set_output("pyenv", "global", f"{GLOBAL_PYTHON}\n")
    return fake


@pytest.fixture
def make_scaffolder(config, runner):
    """Return a factory building a ProjectScaffolder with every tool available."""
    def _make(**kwargs):
        kwargs.setdefault("tool_available", lambda name: True)
        kwargs.setdefault("identity_lookup", lambda: "")
        return ProjectScaffolder(kwargs.pop("config", config), runner, **kwargs)
    return _make


def snapshot_tree(root):
    """Return a sorted list of every path under root, relative to root."""
    entries = []
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            entries.append(os.path.relpath(os.path.join(dirpath, name), root))
    return sorted(entries)


@pytest.fixture
def tree_snapshot():
    return snapshot_tree
