"""
Service layer for eureka.

Services wire core components together behind a small API that any
interface (the CLI today) can call.
"""

from eureka.core.services.capture import CaptureOutcome, IdeaCaptureService

__all__ = [
    "CaptureOutcome",
    "IdeaCaptureService",
]
