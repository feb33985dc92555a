"""
HTTP Infrastructure

httpx adapter delivering invocation envelopes to callback endpoints.
"""

from .callback_client import CallbackClient, get_callback_client

__all__ = ["CallbackClient", "get_callback_client"]
