"""
Tests for IdeaCaptureService, the end-to-end capture flow.

Editor and git processes are mocked at subprocess.run so the exact command
lines can be checked in order.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from eureka.core.config.models import EurekaConfig
from eureka.core.config.store import (
    ConfigIOError,
    ConfigKey,
    FileConfigStore,
    MemoryConfigStore,
)
from eureka.core.editor import EditorLaunchError, EditorNotFoundError, EditorSource
from eureka.core.git import GitPushError, Stage
from eureka.core.services import IdeaCaptureService


def _completed(code: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=code)


@pytest.fixture
def mock_run():
    """Single subprocess.run mock shared by the editor and git modules."""
    with (
        patch("eureka.core.git.persister.shutil.which", return_value="git"),
        patch("subprocess.run", return_value=_completed()) as run,
    ):
        yield run


def _commands(mock: MagicMock) -> list[list[str]]:
    return [c.args[0] for c in mock.call_args_list]


class TestScenario:
    """The reference capture scenario."""

    def test_stored_nano_run(
        self, mock_run: MagicMock, prompts_factory, executable_factory, tmp_path: Path
    ) -> None:
        bin_dir = tmp_path / "usr" / "bin"
        bin_dir.mkdir(parents=True)
        nano = executable_factory(bin_dir, "nano")
        store = MemoryConfigStore(
            {ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: str(nano)}
        )
        prompts = prompts_factory(commit_message="Add caching idea")
        service = IdeaCaptureService(store, prompts, environ={"PATH": str(bin_dir)})

        outcome = service.run()

        flags = ["--git-dir=/tmp/ideas/.git/", "--work-tree=/tmp/ideas"]
        assert _commands(mock_run) == [
            [str(nano), "/tmp/ideas/README.md"],
            ["git", *flags, "add", "-A"],
            ["git", *flags, "commit", "-m", "Add caching idea"],
            ["git", *flags, "push", "origin", "master"],
        ]
        assert outcome.persisted
        assert outcome.commit_message == "Add caching idea"
        assert outcome.editor.source is EditorSource.STORED
        assert prompts.calls == ["commit_message"]


class TestResolveRepo:
    """Tests for repo path resolution."""

    def test_stored_repo_skips_prompt(self, prompts) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/home/me/ideas"})
        repo = IdeaCaptureService(store, prompts).resolve_repo()

        assert repo.path == Path("/home/me/ideas")
        assert prompts.calls == []

    def test_first_run_prompts_and_stores(self, config_home: Path, prompts_factory) -> None:
        store = FileConfigStore.default()
        prompts = prompts_factory(repo_path="  /home/me/ideas \n")

        repo = IdeaCaptureService(store, prompts).resolve_repo()

        assert repo.path == Path("/home/me/ideas")
        assert prompts.calls == ["banner", "repo_path"]
        assert (config_home / "eureka" / "repo_path").read_text() == "/home/me/ideas\n"

    def test_blank_repo_path_is_asked_again(self, config_home: Path, prompts_factory) -> None:
        store = FileConfigStore.default()
        prompts = prompts_factory(repo_path=["   ", "", "/home/me/ideas"])

        repo = IdeaCaptureService(store, prompts).resolve_repo()

        assert repo.path == Path("/home/me/ideas")
        assert prompts.calls == ["banner", "repo_path", "repo_path", "repo_path"]
        assert prompts.warnings == ["The repo path cannot be empty"] * 2
        assert (config_home / "eureka" / "repo_path").read_text() == "/home/me/ideas\n"

    def test_first_run_config_dir_not_creatable(
        self, tmp_path: Path, prompts
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = FileConfigStore(blocker / "eureka")

        with pytest.raises(ConfigIOError):
            IdeaCaptureService(store, prompts).resolve_repo()

        assert "repo_path" not in prompts.calls

    def test_clear_repo_triggers_prompt_next_run(
        self, config_home: Path, prompts_factory
    ) -> None:
        store = FileConfigStore.default()
        store.ensure_location()
        store.write(ConfigKey.REPO_PATH, "/old/ideas")
        prompts = prompts_factory(repo_path="/new/ideas")
        service = IdeaCaptureService(store, prompts)

        assert service.resolve_repo().path == Path("/old/ideas")
        service.clear(ConfigKey.REPO_PATH)

        assert service.resolve_repo().path == Path("/new/ideas")
        assert prompts.calls == ["banner", "repo_path"]


class TestRun:
    """Tests for IdeaCaptureService.run failure handling."""

    def _service(self, store, prompts, search_path: str, config=None, **kwargs):
        return IdeaCaptureService(
            store, prompts, config, environ={"PATH": search_path}, **kwargs
        )

    def test_first_run_asks_everything_in_order(
        self,
        mock_run: MagicMock,
        memory_store: MemoryConfigStore,
        prompts_factory,
        editor_config: EurekaConfig,
        fake_editors: dict[str, Path],
        search_path: str,
    ) -> None:
        prompts = prompts_factory(repo_path="/tmp/ideas", editor_choice="2")

        outcome = self._service(memory_store, prompts, search_path, editor_config).run()

        assert prompts.calls == ["banner", "repo_path", "editor_choice", "commit_message"]
        assert memory_store.read(ConfigKey.REPO_PATH) == "/tmp/ideas"
        assert memory_store.read(ConfigKey.EDITOR_PATH) == str(fake_editors["nano"])
        assert outcome.editor.source is EditorSource.FIRST_RUN
        assert _commands(mock_run)[0] == [str(fake_editors["nano"]), "/tmp/ideas/README.md"]

    def test_editor_not_found_is_fatal(
        self, mock_run: MagicMock, prompts, search_path: str
    ) -> None:
        store = MemoryConfigStore(
            {ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: "emacs"}
        )

        with pytest.raises(EditorNotFoundError):
            self._service(store, prompts, search_path).run()

        mock_run.assert_not_called()
        assert "commit_message" not in prompts.calls

    def test_launch_failure_skips_persistence(
        self, prompts, fake_editors: dict[str, Path], search_path: str
    ) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: "vim"})
        launcher = MagicMock(
            side_effect=EditorLaunchError(str(fake_editors["vim"]), "/tmp/ideas/README.md", OSError())
        )
        persister = MagicMock()

        with pytest.raises(EditorLaunchError):
            self._service(
                store, prompts, search_path, launcher=launcher, persister=persister
            ).run()

        persister.persist_and_push.assert_not_called()

    def test_nonzero_editor_exit_still_persists(
        self, mock_run: MagicMock, prompts, fake_editors: dict[str, Path], search_path: str
    ) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: "vim"})
        mock_run.side_effect = [_completed(1), _completed(), _completed(), _completed()]

        outcome = self._service(store, prompts, search_path).run()

        assert outcome.persisted
        assert mock_run.call_count == 4

    def test_git_failure_is_returned_not_raised(
        self, mock_run: MagicMock, prompts, fake_editors: dict[str, Path], search_path: str
    ) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: "vim"})
        mock_run.side_effect = [_completed(), _completed(), _completed(), _completed(1)]

        outcome = self._service(store, prompts, search_path).run()

        assert not outcome.persisted
        assert outcome.persist.stage is Stage.PUSH
        assert isinstance(outcome.persist.error, GitPushError)

    def test_failed_add_prevents_commit_and_push(
        self, mock_run: MagicMock, prompts, fake_editors: dict[str, Path], search_path: str
    ) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/tmp/nope", ConfigKey.EDITOR_PATH: "vim"})
        mock_run.side_effect = [_completed(), _completed(128)]

        outcome = self._service(store, prompts, search_path).run()

        assert outcome.persist.stage is Stage.ADD
        subcommands = [cmd[3] for cmd in _commands(mock_run)[1:]]
        assert subcommands == ["add"]

    def test_env_override_used_for_launch(
        self, mock_run: MagicMock, prompts, fake_editors: dict[str, Path], search_path: str
    ) -> None:
        store = MemoryConfigStore({ConfigKey.REPO_PATH: "/tmp/ideas", ConfigKey.EDITOR_PATH: "vim"})
        service = IdeaCaptureService(
            store, prompts, environ={"PATH": search_path, "EDITOR": "nano -w"}
        )

        service.run()

        assert _commands(mock_run)[0] == [str(fake_editors["nano"]), "-w", "/tmp/ideas/README.md"]


class TestFromConfig:
    """Tests for IdeaCaptureService.from_config."""

    def test_uses_file_store(self, config_home: Path, prompts) -> None:
        service = IdeaCaptureService.from_config(prompts)

        assert isinstance(service.store, FileConfigStore)
        assert service.store.config_dir == config_home / "eureka"
        assert service.config == EurekaConfig()
