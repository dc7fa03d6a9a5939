"""
Configuration models, storage and loading.

This module provides the Pydantic model holding the pipeline constants and
the key-value store for the two values eureka persists between runs.
"""

from .env import load_user_env
from .loader import (
    get_config_dir,
    get_user_env_path,
    get_xdg_config_home,
    load_config,
)
from .models import EditorChoice, EurekaConfig
from .store import (
    ConfigIOError,
    ConfigKey,
    ConfigStore,
    FileConfigStore,
    MemoryConfigStore,
)

__all__ = [
    # Models
    "EditorChoice",
    "EurekaConfig",
    # Storage
    "ConfigIOError",
    "ConfigKey",
    "ConfigStore",
    "FileConfigStore",
    "MemoryConfigStore",
    # Loader functions
    "get_config_dir",
    "get_user_env_path",
    "get_xdg_config_home",
    "load_config",
    "load_user_env",
]
