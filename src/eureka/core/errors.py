"""
Base exception for eureka.

Each component defines its own error types as subclasses of EurekaError so
the CLI can catch everything eureka raises in one place and choose the
exit code.
"""


class EurekaError(Exception):
    """Base class for all eureka specific errors."""
