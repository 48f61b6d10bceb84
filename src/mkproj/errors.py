"""Error types raised by mkproj operations.

Core modules raise these; only the Click layer turns them into an
``Error: ...`` line on stderr and a non-zero exit status.
"""

import sys
from contextlib import contextmanager


class MkprojError(Exception):
    """Base class for all mkproj failures."""


class ValidationError(MkprojError):
    """Bad input or a failed pre-flight check, raised before any side effect."""


class ExecutionError(MkprojError):
    """An external tool exited with a non-zero status.

    Args:
        failure_message: Caller-level description of what was being attempted.
        stderr: Diagnostic text captured from the tool.
    """

    def __init__(self, failure_message: str, stderr: str = ""):
        self.failure_message = failure_message
        self.stderr = stderr
        super().__init__(self._compose())

    def _compose(self) -> str:
        detail = self.stderr.strip()
        if not detail:
            return self.failure_message
        return f"{self.failure_message}\n{detail}"


@contextmanager
def exit_on_failure():
    """Report an MkprojError as ``Error: ...`` on stderr and exit with status 1."""
    try:
        yield
    except MkprojError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
