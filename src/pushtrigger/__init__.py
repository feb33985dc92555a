"""
pushtrigger

Helpers for invoking workflow engine push trigger callbacks.
"""

__version__ = "1.0.0"

from .domain.entities import Callback
from .domain.errors import (
    CallbackConfigurationError,
    CallbackSerializationError,
    PushTriggerError,
)
from .domain.ports import ICallbackPort, ICallbackStore, IClientCallbackStore
from .domain.value_objects import NO_OUTPUT, Credentials
from .infrastructure.dependencies import configure_dependencies
from .infrastructure.http import CallbackClient

configure_dependencies()

__all__ = [
    "Callback",
    "Credentials",
    "NO_OUTPUT",
    "CallbackClient",
    "ICallbackPort",
    "ICallbackStore",
    "IClientCallbackStore",
    "PushTriggerError",
    "CallbackConfigurationError",
    "CallbackSerializationError",
]
