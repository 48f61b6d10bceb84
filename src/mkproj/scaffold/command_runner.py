"""CommandRunner: runs one external tool and turns a non-zero exit into ExecutionError.

Every git, gh, pyenv and pip call made while scaffolding goes through
CommandRunner so that tests can substitute FakeCommandRunner without
unittest.mock.patch.
"""

import os
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from mkproj.errors import ExecutionError


@dataclass(frozen=True)
class CommandInvocation:
    """One external command: what to run, where, and what to say if it fails."""
    executable: str
    arguments: tuple = ()
    failure_message: str = ""
    cwd: Optional[str] = None
    capture_stdout: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of a finished command."""
    returncode: int
    stderr: str = ""
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs external commands synchronously.

    Standard output is inherited from the calling process unless the caller
    asks for it to be captured. Standard error is always captured so that it
    can be attached to the ExecutionError raised on failure.
    """

    def run(
        self, executable: str, arguments: Sequence[str], failure_message: str,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Run a command, raising ExecutionError if it exits non-zero."""
        return self.execute(CommandInvocation(
            executable, tuple(arguments), failure_message, cwd=cwd,
        ))

    def capture(
        self, executable: str, arguments: Sequence[str], failure_message: str,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Like run(), but also captures standard output into the result."""
        return self.execute(CommandInvocation(
            executable, tuple(arguments), failure_message, cwd=cwd,
            capture_stdout=True,
        ))

    def execute(self, invocation: CommandInvocation) -> CommandResult:
        try:
            completed = subprocess.run(
                invocation.argv,
                cwd=invocation.cwd,
                stdout=subprocess.PIPE if invocation.capture_stdout else None,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            if invocation.cwd is not None and not os.path.isdir(invocation.cwd):
                detail = f"Working directory not found: {invocation.cwd}"
            else:
                detail = f"Command not found: {invocation.executable}"
            raise ExecutionError(invocation.failure_message, detail) from e
        except OSError as e:
            raise ExecutionError(
                invocation.failure_message,
                f"Could not start {invocation.executable}: {e.strerror or e}",
            ) from e

        result = CommandResult(
            returncode=completed.returncode,
            stderr=completed.stderr or "",
            stdout=completed.stdout or "",
        )
        if not result.ok:
            raise ExecutionError(invocation.failure_message, result.stderr)
        return result
