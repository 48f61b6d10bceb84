"""mkproj configuration: the project-type registry and scaffolding defaults.

The config file uses a flat ``key: value`` format::

    # project types
    type.research: ~/projects/research
    type.tools: ~/projects/tools

    gitignore_template: ~/.config/mkproj/gitignore
    license_holder: Jane Doe
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from mkproj.errors import ValidationError

CONFIG_ENV_VAR = "MKPROJ_CONFIG"
TYPE_KEY_PREFIX = "type."
DEFAULT_GITIGNORE_TEMPLATE = "gitignore"
_SETTING_KEYS = ("gitignore_template", "license_holder")


def default_config_path() -> str:
    """Return ``$XDG_CONFIG_HOME/mkproj/config`` (``~/.config`` when unset)."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(config_home, "mkproj", "config")


class ProjectTypeRegistry(Mapping):
    """Read-only mapping of project type name to base directory."""

    def __init__(self, base_dirs=None):
        self._base_dirs = dict(base_dirs or {})

    def __getitem__(self, name):
        return self._base_dirs[name]

    def __iter__(self):
        return iter(sorted(self._base_dirs))

    def __len__(self):
        return len(self._base_dirs)

    def base_dir(self, name: str) -> str:
        """Return the base directory registered for a project type.

        Raises:
            ValidationError: If the type is not registered.
        """
        if name not in self._base_dirs:
            known = ", ".join(self) or "none configured"
            raise ValidationError(f"Unknown project type '{name}' (known types: {known})")
        return self._base_dirs[name]


@dataclass(frozen=True)
class MkprojConfig:
    registry: ProjectTypeRegistry = field(default_factory=ProjectTypeRegistry)
    gitignore_template: Optional[str] = None
    license_holder: Optional[str] = None


def load_config(path: str) -> MkprojConfig:
    """Read the config file at path.

    A missing file yields an empty registry. Paths are expanded with ``~``
    and resolved relative to the config file's directory.

    Raises:
        ValidationError: If a line is malformed or uses an unknown key.
    """
    if not os.path.isfile(path):
        return MkprojConfig()

    config_dir = os.path.dirname(os.path.abspath(path))
    base_dirs = {}
    settings = {}
    with open(path) as f:
        for lineno, raw_line in enumerate(f, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            key, value = _split_line(path, lineno, line)
            if key.startswith(TYPE_KEY_PREFIX):
                type_name = key[len(TYPE_KEY_PREFIX):]
                if not type_name:
                    raise ValidationError(f"{path}:{lineno}: missing project type name in '{key}'")
                base_dirs[type_name] = _resolve_path(value, config_dir)
            elif key in _SETTING_KEYS:
                settings[key] = value
            else:
                raise ValidationError(f"{path}:{lineno}: unknown key '{key}'")

    gitignore_template = _resolve_path(
        settings.get("gitignore_template", DEFAULT_GITIGNORE_TEMPLATE), config_dir,
    )
    return MkprojConfig(
        registry=ProjectTypeRegistry(base_dirs),
        gitignore_template=gitignore_template,
        license_holder=settings.get("license_holder"),
    )


def _split_line(path, lineno, line):
    key, sep, value = line.partition(":")
    key = key.strip()
    value = value.strip()
    if not sep or not key or not value:
        raise ValidationError(f"{path}:{lineno}: expected 'key: value', got '{line}'")
    return key, value


def _resolve_path(value, config_dir):
    return os.path.normpath(os.path.join(config_dir, os.path.expanduser(value)))
