"""
Git persistence for the idea repo.

Modules:
    persister: add -A / commit -m / push origin master sequence
    models: Data models (IdeaRepo, Stage, PersistResult)
"""

from eureka.core.git.models import IdeaRepo, PersistResult, Stage
from eureka.core.git.persister import (
    GitCommitError,
    GitPersistError,
    GitPersister,
    GitPushError,
    GitStageError,
)

__all__ = [
    "GitCommitError",
    "GitPersistError",
    "GitPersister",
    "GitPushError",
    "GitStageError",
    "IdeaRepo",
    "PersistResult",
    "Stage",
]
