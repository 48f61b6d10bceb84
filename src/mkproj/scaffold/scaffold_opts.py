"""Value objects describing the project to scaffold."""

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from mkproj.errors import ValidationError

_URL_PATTERN = re.compile(r"^(?:(?:https?|ssh|git|file)://\S+|[\w.-]+@[\w.-]+:\S+)$")


class RemoteKind(Enum):
    NONE = "none"
    CREATE_PUBLIC = "public"
    CREATE_PRIVATE = "private"
    EXISTING_URL = "url"


@dataclass(frozen=True)
class RemoteMode:
    """How the new repository is linked to a hosted remote."""

    kind: RemoteKind = RemoteKind.NONE
    url: Optional[str] = None

    @classmethod
    def parse(cls, value: Optional[str]) -> "RemoteMode":
        """Parse the --github option: ``public``, ``private`` or a remote URL.

        Raises:
            ValidationError: If the value is neither a visibility nor a URL.
        """
        if not value:
            return cls()
        if value == RemoteKind.CREATE_PUBLIC.value:
            return cls(RemoteKind.CREATE_PUBLIC)
        if value == RemoteKind.CREATE_PRIVATE.value:
            return cls(RemoteKind.CREATE_PRIVATE)
        if _URL_PATTERN.match(value):
            return cls(RemoteKind.EXISTING_URL, url=value)
        raise ValidationError(
            f"Invalid remote '{value}': expected 'public', 'private' or a repository URL"
        )

    @property
    def creates_repository(self) -> bool:
        return self.kind in (RemoteKind.CREATE_PUBLIC, RemoteKind.CREATE_PRIVATE)

    @property
    def visibility(self) -> Optional[str]:
        if self.creates_repository:
            return self.kind.value
        return None


@dataclass(frozen=True)
class ProjectSpec:
    """Caller input for one scaffolding run. Never mutated after construction."""

    name: str
    project_type: str
    remote: RemoteMode = field(default_factory=RemoteMode)
    python_version: Optional[str] = None
    requirements: Optional[str] = None
    open_editor: bool = False
    with_license: bool = False
    license_holder: Optional[str] = None


@dataclass(frozen=True)
class ResolvedProject:
    """A ProjectSpec after validation, with every path and version resolved."""

    spec: ProjectSpec
    base_dir: str
    python_version: str
    requirements: Optional[str] = None

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def target_dir(self) -> str:
        return os.path.join(self.base_dir, self.spec.name)
