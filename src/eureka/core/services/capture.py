"""
Idea capture service: the end-to-end eureka flow.

    resolve repo path (first-run prompt if unset)
    -> resolve editor (first-run menu if unset)
    -> ask for the commit subject
    -> open README.md in the editor
    -> git add / commit / push

Configuration and editor errors are raised and end the run. Git failures
are returned in the outcome instead: the idea is already saved on disk by
then, so the caller decides how loudly to report it.

Usage:
    >>> from eureka.core.services.capture import IdeaCaptureService
    >>> service = IdeaCaptureService.from_config(prompts)
    >>> outcome = service.run()
    >>> outcome.persisted
    True
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping

from eureka.core.config.loader import load_config
from eureka.core.config.models import EurekaConfig
from eureka.core.config.store import ConfigKey, ConfigStore, FileConfigStore
from eureka.core.editor.launcher import launch_editor
from eureka.core.editor.models import ResolvedEditor
from eureka.core.editor.resolver import EditorResolver
from eureka.core.git.models import IdeaRepo, PersistResult
from eureka.core.git.persister import GitPersister
from eureka.core.prompts import Prompts

logger = logging.getLogger(__name__)

EditorLauncher = Callable[[ResolvedEditor, str], int]


@dataclass
class CaptureOutcome:
    """What a single capture run did."""

    repo: IdeaRepo
    editor: ResolvedEditor
    commit_message: str
    persist: PersistResult

    @property
    def persisted(self) -> bool:
        return self.persist.success


class IdeaCaptureService:
    """
    Service running the capture-and-persist pipeline.

    Example:
        >>> service = IdeaCaptureService(MemoryConfigStore(), prompts)
        >>> service.clear(ConfigKey.EDITOR_PATH)
        >>> outcome = service.run()
    """

    def __init__(
        self,
        store: ConfigStore,
        prompts: Prompts,
        config: EurekaConfig | None = None,
        environ: Mapping[str, str] | None = None,
        launcher: EditorLauncher | None = None,
        persister: GitPersister | None = None,
    ) -> None:
        """
        Initialize service with dependencies.

        Args:
            store: Persisted repo path and editor
            prompts: Terminal interaction
            config: Pipeline constants (defaults if None)
            environ: Process environment (os.environ if None)
            launcher: Function opening the editor (launch_editor if None)
            persister: Git sequence runner (GitPersister if None)
        """
        self._store = store
        self._prompts = prompts
        self._config = config or EurekaConfig()
        self._environ = os.environ if environ is None else environ
        self._launcher = launcher or launch_editor
        self._persister = persister or GitPersister(self._config)

    @classmethod
    def from_config(
        cls, prompts: Prompts, config: EurekaConfig | None = None
    ) -> IdeaCaptureService:
        """
        Create service backed by the on-disk config store.

        Args:
            prompts: Terminal interaction
            config: Optional pipeline constants (loaded if None)

        Returns:
            Configured IdeaCaptureService instance
        """
        if config is None:
            config = load_config()
        return cls(FileConfigStore.default(), prompts, config)

    @property
    def config(self) -> EurekaConfig:
        """The pipeline constants."""
        return self._config

    @property
    def store(self) -> ConfigStore:
        """The config store."""
        return self._store

    def clear(self, key: ConfigKey) -> None:
        """
        Forget a stored value so the next run prompts for it again.

        Raises:
            ConfigIOError: If the value exists but can't be removed
        """
        self._store.remove(key)
        logger.info("Cleared stored %s", key.value)

    def resolve_repo(self) -> IdeaRepo:
        """
        Get the idea repo, asking for it on first run.

        Raises:
            ConfigIOError: If the config directory or value can't be written
        """
        stored = self._store.read(ConfigKey.REPO_PATH)
        if stored is not None:
            return IdeaRepo.from_string(stored)

        self._prompts.first_run_banner()
        self._store.ensure_location()

        repo_path = self._prompts.ask_repo_path().strip()
        while not repo_path:
            self._prompts.warn("The repo path cannot be empty")
            repo_path = self._prompts.ask_repo_path().strip()
        self._store.write(ConfigKey.REPO_PATH, repo_path)
        return IdeaRepo.from_string(repo_path)

    def resolve_editor(self) -> ResolvedEditor:
        """
        Get the editor for this run.

        Raises:
            EditorNotFoundError: If the editor can't be found
            ConfigIOError: If a first-run choice can't be stored
        """
        resolver = EditorResolver(self._store, self._prompts, self._config, self._environ)
        return resolver.resolve()

    def run(self) -> CaptureOutcome:
        """
        Capture one idea.

        Returns:
            CaptureOutcome, including the git result

        Raises:
            ConfigIOError: If first-run configuration can't be stored
            EditorNotFoundError: If no editor can be found
            EditorLaunchError: If the editor can't be started
        """
        repo = self.resolve_repo()
        editor = self.resolve_editor()
        commit_message = self._prompts.ask_commit_message()

        idea_file = repo.idea_file(self._config.idea_file)
        self._launcher(editor, str(idea_file))

        persist = self._persister.persist_and_push(repo, commit_message)
        if not persist.success:
            logger.debug("Idea saved to %s but not persisted: %s", idea_file, persist.error)

        return CaptureOutcome(
            repo=repo,
            editor=editor,
            commit_message=commit_message,
            persist=persist,
        )


__all__ = [
    "CaptureOutcome",
    "IdeaCaptureService",
]
