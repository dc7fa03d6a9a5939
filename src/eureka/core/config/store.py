"""
Key-value storage for eureka's two persisted settings.

Each key is kept as its own small text file in the config directory:

    ~/.config/eureka/repo_path      absolute path to the idea repo
    ~/.config/eureka/editor_path    editor command, arguments space-delimited

Values are never cached in memory, so clearing a key is visible to the
very next read.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Protocol

from eureka.core.errors import EurekaError

from .loader import get_config_dir

logger = logging.getLogger(__name__)


class ConfigKey(str, Enum):
    """Names of the values eureka persists between runs."""

    REPO_PATH = "repo_path"
    EDITOR_PATH = "editor_path"


class ConfigIOError(EurekaError):
    """Stored configuration could not be written or removed."""

    def __init__(self, action: str, path: Path | str, error: OSError) -> None:
        self.action = action
        self.path = str(path)
        self.error = error
        super().__init__(f"Could not {action} {self.path}: {error}")


class ConfigStore(Protocol):
    """Interface every config store implements."""

    def read(self, key: ConfigKey) -> str | None: ...

    def write(self, key: ConfigKey, value: str) -> None: ...

    def remove(self, key: ConfigKey) -> None: ...

    def ensure_location(self) -> None: ...


class FileConfigStore:
    """
    Config store backed by one file per key.

    Example:
        store = FileConfigStore.default()
        store.ensure_location()
        store.write(ConfigKey.REPO_PATH, "/home/me/ideas")
        store.read(ConfigKey.REPO_PATH)  # "/home/me/ideas"
    """

    def __init__(self, config_dir: Path):
        """
        Initialize store with a config directory.

        Args:
            config_dir: Directory holding one file per key
        """
        self.config_dir = Path(config_dir)

    @classmethod
    def default(cls) -> FileConfigStore:
        """Store rooted at the XDG config location."""
        return cls(get_config_dir())

    def path_for(self, key: ConfigKey) -> Path:
        return self.config_dir / key.value

    def read(self, key: ConfigKey) -> str | None:
        """
        Read a stored value.

        Returns:
            The stored string, or None if the key is missing or empty.
            Unreadable files are logged and treated as missing so the
            first-run prompt can replace them.
        """
        path = self.path_for(key)
        try:
            value = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Failed to read %s, treating it as unset: %s", path, e)
            return None

        value = value.rstrip("\r\n")
        return value or None

    def write(self, key: ConfigKey, value: str) -> None:
        """
        Store a value, replacing any previous one.

        The config directory must already exist; see ensure_location().

        Raises:
            ConfigIOError: If the file cannot be written
        """
        path = self.path_for(key)
        try:
            path.write_text(value + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigIOError("write", path, e) from e
        logger.debug("Stored %s in %s", key.value, path)

    def remove(self, key: ConfigKey) -> None:
        """
        Remove a stored value if present.

        Raises:
            ConfigIOError: If the file exists but cannot be removed
        """
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise ConfigIOError("remove", path, e) from e
        logger.debug("Removed %s", path)

    def ensure_location(self) -> None:
        """
        Create the config directory if it doesn't exist.

        Raises:
            ConfigIOError: If the directory cannot be created
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigIOError("create config directory", self.config_dir, e) from e


class MemoryConfigStore:
    """Config store backed by a dict. Useful for tests and embedding."""

    def __init__(self, values: dict[ConfigKey, str] | None = None):
        self.values: dict[ConfigKey, str] = dict(values or {})

    def read(self, key: ConfigKey) -> str | None:
        return self.values.get(key) or None

    def write(self, key: ConfigKey, value: str) -> None:
        self.values[key] = value

    def remove(self, key: ConfigKey) -> None:
        self.values.pop(key, None)

    def ensure_location(self) -> None:
        pass
