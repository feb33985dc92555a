"""
Domain Ports

Port interfaces defining contracts between layers.
Callback stores are implemented by the embedding application.
"""

from .callback_port import ICallbackPort
from .callback_store_port import ICallbackStore
from .client_callback_store_port import IClientCallbackStore

__all__ = [
    # Delivery
    "ICallbackPort",
    # Registry
    "ICallbackStore",
    "IClientCallbackStore",
]
