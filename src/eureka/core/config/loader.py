"""
Config directory location.

Eureka keeps its state under the XDG config home:
    $XDG_CONFIG_HOME/eureka/   (defaults to ~/.config/eureka/)
"""

import os
from pathlib import Path

from .models import EurekaConfig

APP_NAME = "eureka"


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_config_dir() -> Path:
    """
    Get the directory holding eureka's stored values.

    Returns:
        Path to ~/.config/eureka (or XDG equivalent)
    """
    return get_xdg_config_home() / APP_NAME


def get_user_env_path() -> Path:
    """
    Get path to the user's dotenv file.

    Returns:
        Path to ~/.config/eureka/.env (or XDG equivalent)
    """
    return get_config_dir() / ".env"


def load_config() -> EurekaConfig:
    """
    Build the pipeline configuration.

    The remote, branch and idea file name are fixed, so this only returns
    the validated defaults. It exists so callers never construct the model
    with ad-hoc overrides.
    """
    return EurekaConfig()
