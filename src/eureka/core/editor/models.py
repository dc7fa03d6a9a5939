"""
Data models for editor resolution and launching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EditorSource(str, Enum):
    """Where the editor command came from."""

    ENVIRONMENT = "environment"  # $EDITOR override
    STORED = "stored"  # previously saved choice
    FIRST_RUN = "first_run"  # picked from the menu this run


@dataclass(frozen=True)
class ResolvedEditor:
    """
    An editor ready to spawn.

    Attributes:
        binary_path: Absolute path of the executable found on PATH
        args: Arguments passed before the file to edit
        source: Which configuration layer supplied the command
    """

    binary_path: str
    args: tuple[str, ...] = field(default_factory=tuple)
    source: EditorSource = EditorSource.STORED

    def command_for(self, target: str) -> list[str]:
        """Full argv for editing target. The file always goes last."""
        return [self.binary_path, *self.args, target]


__all__ = [
    "EditorSource",
    "ResolvedEditor",
]
