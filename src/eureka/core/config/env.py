"""Environment loading helpers.

Eureka reads a user dotenv file (``~/.config/eureka/.env``) at startup so
settings such as ``EDITOR`` can be kept next to the rest of its state.

We intentionally do *not* let .env override variables that are already
present in the process environment (e.g. exported in the shell).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_user_env_path


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def load_user_env(env_paths: Iterable[Path] | None = None) -> list[str]:
    """Load environment variables from the user's dotenv files.

    Args:
        env_paths: explicit env file paths (defaults to the eureka config dir)

    Returns:
        Names of the variables that were set by this call
    """
    if env_paths is None:
        env_paths = [get_user_env_path()]

    loaded: list[str] = []
    for p in env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v
                loaded.append(k)
    return loaded
