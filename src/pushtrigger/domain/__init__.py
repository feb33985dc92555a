"""
Push Trigger Domain Layer

Callback entity, credential value objects, errors and the ports
implemented by infrastructure and by embedding applications.
"""

from .entities import Callback
from .errors import CallbackConfigurationError, CallbackSerializationError, PushTriggerError
from .value_objects import NO_OUTPUT, Credentials, build_envelope

__all__ = [
    "Callback",
    "Credentials",
    "NO_OUTPUT",
    "build_envelope",
    "set_default_callback_port",
    "PushTriggerError",
    "CallbackConfigurationError",
    "CallbackSerializationError",
]
