"""
Editor launcher.

Runs the resolved editor in the foreground on the idea file and waits for
it to exit.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from eureka.core.editor.models import ResolvedEditor
from eureka.core.errors import EurekaError

logger = logging.getLogger(__name__)


class EditorLaunchError(EurekaError):
    """The editor process could not be started."""

    def __init__(self, binary_path: str, target: str, error: OSError) -> None:
        self.binary_path = binary_path
        self.target = target
        self.error = error
        super().__init__(
            f"Unable to open file [{target}] with editor binary at [{binary_path}]: {error}"
        )


def launch_editor(editor: ResolvedEditor, target: Path | str) -> int:
    """
    Open target in the editor and block until the editor exits.

    Only a failure to start the editor is an error. A nonzero exit status
    is logged and returned, but the capture carries on.

    Args:
        editor: Editor to run
        target: File to edit, appended after the editor's own arguments

    Returns:
        The editor's exit status

    Raises:
        EditorLaunchError: If the editor can't be spawned
    """
    target = str(target)
    cmd = editor.command_for(target)
    logger.debug("Running editor: %s", " ".join(cmd))

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        raise EditorLaunchError(editor.binary_path, target, e) from e

    if result.returncode != 0:
        logger.warning("Editor %s exited with code %d", editor.binary_path, result.returncode)
    return result.returncode


__all__ = [
    "EditorLaunchError",
    "launch_editor",
]
