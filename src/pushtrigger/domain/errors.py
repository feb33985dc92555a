"""
Domain Errors

Error types raised by the callback layer before any network activity.
Transport failures are not wrapped: they surface as httpx exceptions.
"""

from typing import Any, Optional


class PushTriggerError(Exception):
    """Base class for push trigger errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CallbackConfigurationError(PushTriggerError):
    """Callback endpoint is missing or invalid."""
    pass


class CallbackSerializationError(PushTriggerError):
    """Trigger output cannot be converted to JSON."""
    pass
