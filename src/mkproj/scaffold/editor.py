"""Open a newly created project in the user's editor without waiting for it."""

import os
import shlex
import shutil
import subprocess


def detect_editor() -> list[str]:
    """Detect the best available editor.

    Detection order: code, $VISUAL, $EDITOR, vi.

    Returns:
        Editor command as a list of strings
    """
    if shutil.which("code"):
        return ["code"]
    for variable in ("VISUAL", "EDITOR"):
        value = os.environ.get(variable)
        if value:
            return shlex.split(value)
    return ["vi"]


def launch_editor(directory, *, editor_cmd=None):
    """Start the editor on directory and return immediately.

    Raises:
        OSError: If the editor executable cannot be started.
    """
    cmd = (editor_cmd or detect_editor()) + [directory]
    subprocess.Popen(cmd, start_new_session=True)
