"""
Eureka - capture ideas without leaving the terminal.

Opens your idea repo's README.md in your editor, then commits and pushes
the change so the idea is stored durably.
"""

__version__ = "0.4.0"

# Re-export core models for convenience
from eureka.core.config.models import EurekaConfig
from eureka.core.config.store import ConfigKey

__all__ = ["ConfigKey", "EurekaConfig", "__version__"]
