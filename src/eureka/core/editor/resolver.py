"""
Editor resolution.

Decides which editor to run, in priority order:
    1. $EDITOR (authoritative once set: no fallback if it can't be found)
    2. the editor stored by a previous run
    3. first-run menu: vim, nano, or a custom path

Commands are split on whitespace into a binary name and its arguments.
There is no quoting support, so "code --wait" works but a binary path
containing spaces does not.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from eureka.core.config.models import EurekaConfig
from eureka.core.config.store import ConfigKey, ConfigStore
from eureka.core.editor.models import EditorSource, ResolvedEditor
from eureka.core.errors import EurekaError
from eureka.core.prompts import Prompts

logger = logging.getLogger(__name__)


class EditorNotFoundError(EurekaError):
    """No usable editor binary could be found."""

    def __init__(
        self, command: str, source: EditorSource, message: str | None = None
    ) -> None:
        self.command = command
        self.source = source
        super().__init__(message or f"Editor '{command}' ({source.value}) not found in PATH")


class InvalidEditorPathError(EditorNotFoundError):
    """The editor picked during first-run setup doesn't exist on disk."""

    def __init__(self, command: str) -> None:
        super().__init__(command, EditorSource.FIRST_RUN, f"Invalid editor path: {command!r}")


def split_editor_command(command: str) -> tuple[str, list[str]]:
    """
    Split an editor command into the binary name and its arguments.

    Examples:
        >>> split_editor_command("vim -n")
        ('vim', ['-n'])
        >>> split_editor_command("vim")
        ('vim', [])
    """
    parts = command.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


def find_binary(name: str, search_path: str | None) -> str | None:
    """
    Find a regular file called name in the directories of search_path.

    Directories are searched in listed order and the first match wins.
    Absolute names are checked as-is.

    Args:
        name: Bare command token (e.g. "vim" or "/usr/bin/nano")
        search_path: PATH-style string of directories

    Returns:
        Absolute path to the binary, or None if not found
    """
    if not name:
        return None

    if os.path.isabs(name):
        return name if Path(name).is_file() else None

    for directory in (search_path or "").split(os.pathsep):
        if not directory:
            continue
        candidate = Path(directory) / name
        if candidate.is_file():
            return str(candidate.absolute())
    return None


def resolve_editor_command(
    command: str,
    search_path: str | None,
    source: EditorSource = EditorSource.STORED,
) -> ResolvedEditor:
    """
    Turn an editor command string into a ResolvedEditor.

    Raises:
        EditorNotFoundError: If the binary isn't on the search path
    """
    name, args = split_editor_command(command)
    binary_path = find_binary(name, search_path)
    if binary_path is None:
        raise EditorNotFoundError(command, source)

    logger.debug("Resolved editor %r (%s) to %s %s", command, source.value, binary_path, args)
    return ResolvedEditor(binary_path=binary_path, args=tuple(args), source=source)


class EditorResolver:
    """
    Resolves the editor for this run.

    Example:
        >>> resolver = EditorResolver(store, prompts)
        >>> editor = resolver.resolve()
        >>> editor.command_for("/home/me/ideas/README.md")
        ['/usr/bin/vim', '/home/me/ideas/README.md']
    """

    def __init__(
        self,
        store: ConfigStore,
        prompts: Prompts,
        config: EurekaConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize resolver with dependencies.

        Args:
            store: Where the chosen editor is persisted
            prompts: Used for the first-run menu
            config: Pipeline constants (defaults if None)
            environ: Environment to read $EDITOR and PATH from (os.environ if None)
        """
        self._store = store
        self._prompts = prompts
        self._config = config or EurekaConfig()
        self._environ = os.environ if environ is None else environ

    @property
    def search_path(self) -> str | None:
        return self._environ.get("PATH")

    def resolve(self) -> ResolvedEditor:
        """
        Resolve the editor to launch.

        Raises:
            EditorNotFoundError: If the chosen editor can't be found
            InvalidEditorPathError: If the first-run choice doesn't exist
            ConfigIOError: If the first-run choice can't be stored
        """
        override = self._environ.get(self._config.editor_env_var)
        if override:
            return resolve_editor_command(override, self.search_path, EditorSource.ENVIRONMENT)

        stored = self._store.read(ConfigKey.EDITOR_PATH)
        if stored is not None:
            return resolve_editor_command(stored, self.search_path, EditorSource.STORED)

        command = self.choose_editor()
        return resolve_editor_command(command, self.search_path, EditorSource.FIRST_RUN)

    def choose_editor(self) -> str:
        """
        Run the first-run menu and store the result.

        Anything other than a listed number falls back to the first menu
        entry (vim) with a warning. The user is not asked again.

        Returns:
            The editor command as stored
        """
        choices = self._config.editor_choices
        answer = self._prompts.ask_editor_choice(choices).strip()
        other_option = len(choices) + 1

        try:
            picked = int(answer)
        except ValueError:
            picked = 0

        if 1 <= picked <= len(choices):
            command = choices[picked - 1].command
        elif picked == other_option:
            command = self._prompts.ask_editor_path().strip()
        else:
            fallback = self._config.fallback_editor
            logger.warning("Invalid editor choice %r, falling back to %s", answer, fallback.label)
            self._prompts.warn(f"Invalid option, falling back to {fallback.label}")
            command = fallback.command

        if not command or not Path(command).is_file():
            raise InvalidEditorPathError(command)

        self._store.write(ConfigKey.EDITOR_PATH, command)
        return command


__all__ = [
    "EditorNotFoundError",
    "EditorResolver",
    "InvalidEditorPathError",
    "find_binary",
    "resolve_editor_command",
    "split_editor_command",
]
