"""
Data models for persisting ideas to git.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eureka.core.git.persister import GitPersistError


class Stage(str, Enum):
    """Steps of the persistence sequence, in the order they run."""

    ADD = "add"
    COMMIT = "commit"
    PUSH = "push"


@dataclass(frozen=True)
class IdeaRepo:
    """
    The user's idea repository.

    Not validated here: a missing .git directory or README.md shows up as
    an editor or git failure.
    """

    path: Path

    @classmethod
    def from_string(cls, value: str) -> IdeaRepo:
        return cls(Path(value))

    @property
    def git_dir_flag(self) -> str:
        return f"--git-dir={self.path}/.git/"

    @property
    def work_tree_flag(self) -> str:
        return f"--work-tree={self.path}"

    def idea_file(self, name: str = "README.md") -> Path:
        return self.path / name


@dataclass
class PersistResult:
    """Result of the add/commit/push sequence.

    Attributes:
        success: Whether all three stages succeeded
        completed: Stages that finished, in order
        stage: The stage that failed, if any
        error: Error for the failed stage, if any
    """

    success: bool
    completed: list[Stage] = field(default_factory=list)
    stage: Stage | None = None
    error: GitPersistError | None = None


__all__ = [
    "IdeaRepo",
    "PersistResult",
    "Stage",
]
