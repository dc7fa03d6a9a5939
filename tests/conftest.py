"""
Pytest configuration and shared fixtures.

Provides an isolated XDG config home, scripted prompt answers, fake editor
binaries and other test utilities used across the test suite.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Sequence

import pytest

from eureka.core.config.models import EditorChoice, EurekaConfig
from eureka.core.config.store import MemoryConfigStore

# ==============================================================================
# Prompt Doubles
# ==============================================================================


class ScriptedPrompts:
    """Prompts implementation that replays canned answers and records calls.

    A list of repo paths is answered one per call, in order.
    """

    def __init__(
        self,
        *,
        repo_path: str | list[str] = "/tmp/ideas",
        editor_choice: str = "1",
        editor_path: str = "",
        commit_message: str = "New idea",
    ) -> None:
        self.repo_path = repo_path
        self.editor_choice = editor_choice
        self.editor_path = editor_path
        self.commit_message = commit_message
        self.calls: list[str] = []
        self.warnings: list[str] = []

    def first_run_banner(self) -> None:
        self.calls.append("banner")

    def ask_repo_path(self) -> str:
        self.calls.append("repo_path")
        if isinstance(self.repo_path, list):
            return self.repo_path.pop(0)
        return self.repo_path

    def ask_editor_choice(self, choices: Sequence[EditorChoice]) -> str:
        self.calls.append("editor_choice")
        return self.editor_choice

    def ask_editor_path(self) -> str:
        self.calls.append("editor_path")
        return self.editor_path

    def ask_commit_message(self) -> str:
        self.calls.append("commit_message")
        return self.commit_message

    def warn(self, message: str) -> None:
        self.warnings.append(message)


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Empty directory to drop fake executables into."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


def make_executable(directory: Path, name: str, body: str = "exit 0\n") -> Path:
    """Create a small shell script that can stand in for an editor."""
    script = directory / name
    script.write_text("#!/bin/sh\n" + body)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def fake_editors(bin_dir: Path) -> dict[str, Path]:
    """vim and nano stand-ins inside bin_dir."""
    return {
        "vim": make_executable(bin_dir, "vim"),
        "nano": make_executable(bin_dir, "nano"),
    }


@pytest.fixture
def editor_config(fake_editors: dict[str, Path]) -> EurekaConfig:
    """Config whose editor menu points at the fake editors."""
    return EurekaConfig(
        editor_choices=(
            EditorChoice(label="vim", command=str(fake_editors["vim"])),
            EditorChoice(label="nano", command=str(fake_editors["nano"])),
        )
    )


@pytest.fixture
def search_path(bin_dir: Path) -> str:
    """PATH containing only bin_dir."""
    return str(bin_dir)


# ==============================================================================
# Store Fixtures
# ==============================================================================


@pytest.fixture
def memory_store() -> MemoryConfigStore:
    """Empty in-memory config store."""
    return MemoryConfigStore()


@pytest.fixture
def prompts() -> ScriptedPrompts:
    """Prompts answering with defaults."""
    return ScriptedPrompts()


@pytest.fixture
def clean_editor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure $EDITOR from the developer's shell doesn't leak into tests."""
    monkeypatch.delenv("EDITOR", raising=False)


@pytest.fixture
def prompts_factory() -> type[ScriptedPrompts]:
    """The ScriptedPrompts class, for tests that need custom answers."""
    return ScriptedPrompts


@pytest.fixture
def executable_factory():
    """The make_executable helper."""
    return make_executable


# ==============================================================================
# Logging Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def restore_git_logger_level():
    """setup_logging() changes the git logger level; put it back after each test."""
    git_logger = logging.getLogger("eureka.core.git")
    level = git_logger.level
    yield
    git_logger.setLevel(level)
