"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .http import CallbackClient, get_callback_client

__all__ = ["CallbackClient", "get_callback_client"]
