"""Git persistence for captured ideas.

Stages everything in the idea repo, commits it and pushes to
origin/master. Every command passes explicit --git-dir/--work-tree flags,
so the process's working directory doesn't matter.

The sequence stops at the first failing stage. Nothing is retried or
rolled back: after a failed commit the changes stay staged, and after a
failed push the commit stays local.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from eureka.core.config.models import EurekaConfig
from eureka.core.errors import EurekaError
from eureka.core.git.models import IdeaRepo, PersistResult, Stage

logger = logging.getLogger(__name__)


class GitPersistError(EurekaError):
    """A stage of the persistence sequence failed."""

    stage: Stage = Stage.ADD
    action = "run git in"

    def __init__(
        self,
        repo: IdeaRepo,
        command: list[str],
        *,
        error: OSError | None = None,
        returncode: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.repo = repo
        self.command = command
        self.error = error
        self.returncode = returncode
        if detail is None:
            if error is not None:
                detail = str(error)
            else:
                detail = f"git exited with code {returncode}"
        self.detail = detail
        super().__init__(f"Could not {self.action} repo at [{repo.path}]: {detail}")


class GitStageError(GitPersistError):
    """`git add -A` failed."""

    stage = Stage.ADD
    action = "stage files to"


class GitCommitError(GitPersistError):
    """`git commit` failed (including 'nothing to commit')."""

    stage = Stage.COMMIT
    action = "commit new idea to"


class GitPushError(GitPersistError):
    """`git push` failed."""

    stage = Stage.PUSH
    action = "push commit to remote in"


_STAGE_ERRORS: dict[Stage, type[GitPersistError]] = {
    Stage.ADD: GitStageError,
    Stage.COMMIT: GitCommitError,
    Stage.PUSH: GitPushError,
}


class GitPersister:
    """
    Runs add, commit and push against an idea repo.

    Example:
        >>> persister = GitPersister()
        >>> result = persister.persist_and_push(IdeaRepo.from_string("/tmp/ideas"), "New idea")
        >>> result.success
        True
    """

    def __init__(self, config: EurekaConfig | None = None) -> None:
        self._config = config or EurekaConfig()

    def stage_args(self, stage: Stage, commit_message: str) -> list[str]:
        """Subcommand and arguments for a stage."""
        if stage is Stage.ADD:
            return ["add", "-A"]
        if stage is Stage.COMMIT:
            return ["commit", "-m", commit_message]
        return ["push", self._config.remote, self._config.branch]

    def persist_and_push(self, repo: IdeaRepo, commit_message: str) -> PersistResult:
        """
        Stage, commit and push everything in the repo.

        Args:
            repo: Idea repository
            commit_message: Passed verbatim to `git commit -m`

        Returns:
            PersistResult describing which stages ran and what failed
        """
        result = PersistResult(success=False)

        git = shutil.which("git")
        if git is None:
            error = GitStageError(repo, ["git"], detail="cannot locate executable 'git'")
            logger.warning("%s", error)
            result.stage = Stage.ADD
            result.error = error
            return result

        for stage in Stage:
            try:
                self._run_stage(git, repo, stage, commit_message)
            except GitPersistError as e:
                result.stage = stage
                result.error = e
                return result
            result.completed.append(stage)

        result.success = True
        return result

    def _run_stage(self, git: str, repo: IdeaRepo, stage: Stage, commit_message: str) -> None:
        cmd = [git, repo.git_dir_flag, repo.work_tree_flag, *self.stage_args(stage, commit_message)]
        error_cls = _STAGE_ERRORS[stage]
        logger.debug("Running git command: %s", " ".join(cmd))

        try:
            completed = subprocess.run(cmd, check=False)
        except OSError as e:
            error = error_cls(repo, cmd, error=e)
            logger.warning("%s", error)
            raise error from e

        if completed.returncode != 0:
            error = error_cls(repo, cmd, returncode=completed.returncode)
            logger.warning("%s", error)
            raise error


__all__ = [
    "GitCommitError",
    "GitPersistError",
    "GitPersister",
    "GitPushError",
    "GitStageError",
]
