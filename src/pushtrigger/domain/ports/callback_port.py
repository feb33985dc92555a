"""
Callback Port Interface

Defines the contract for delivering an invocation envelope to a callback
endpoint. This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx


class ICallbackPort(ABC):
    """
    Port interface for callback delivery.

    Implementations perform exactly one POST per call and return the
    response unmodified. They do not inspect status codes or retry.
    """

    @abstractmethod
    async def post(
        self,
        url: httpx.URL,
        content: bytes,
        headers: Mapping[str, str],
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """
        POST a serialized envelope to a callback endpoint.

        Args:
            url: Credential-free endpoint
            content: UTF-8 encoded JSON body
            headers: Request headers, including Authorization when present
            timeout: httpx timeout, or USE_CLIENT_DEFAULT

        Returns:
            Raw response from the workflow engine

        Raises:
            httpx.HTTPError: On connect, TLS, or timeout failures
        """
        pass
