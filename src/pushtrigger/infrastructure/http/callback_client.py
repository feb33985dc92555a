"""
Push trigger callback client.

Implements ICallbackPort with httpx. Each post is a single request:
no retries, no status inspection. Transport errors propagate unchanged.
"""

from typing import Any, Mapping, Optional

import httpx

from pushtrigger.domain.ports import ICallbackPort
from pushtrigger.infrastructure.config import get_settings
from pushtrigger.infrastructure.logging import get_logger


logger = get_logger(__name__)


class CallbackClient(ICallbackPort):
    """
    Async HTTP client for invoking push trigger callbacks.

    Implements ICallbackPort interface.

    By default a fresh ``httpx.AsyncClient`` is opened and closed for every
    post. With ``pooled=True`` one client is created lazily, reused, and
    closed by ``close()``. A ``client`` passed in is reused but never
    closed here: the caller keeps ownership of it.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        pooled: bool = False,
    ):
        """
        Initialize callback client.

        Args:
            client: Shared httpx client to reuse across posts
            timeout: Default timeout in seconds for clients created here
            transport: Transport for clients created here
            pooled: Keep one owned client instead of one per post
        """
        self._client = client
        self._owns_client = False
        self._pooled = pooled
        self._transport = transport
        self.timeout = timeout if timeout is not None else get_settings().request_timeout

    async def __aenter__(self) -> "CallbackClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_client(self) -> Optional[httpx.AsyncClient]:
        """Get the reusable client, creating the owned one when pooled."""
        if self._client is None and self._pooled:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """
        Close the pooled HTTP client if this instance created it.
        """
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def post(
        self,
        url: httpx.URL,
        content: bytes,
        headers: Mapping[str, str],
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """
        POST a serialized envelope to a callback endpoint.

        Implementation of ICallbackPort.post().

        Args:
            url: Credential-free endpoint
            content: UTF-8 encoded JSON body
            headers: Request headers
            timeout: httpx timeout, client default when omitted

        Returns:
            Raw response from the workflow engine
        """
        logger.debug(
            "Invoking callback",
            endpoint=str(url),
            has_credentials="Authorization" in headers,
            body_bytes=len(content),
        )

        client = self._get_client()
        if client is not None:
            response = await client.post(url, content=content, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, content=content, headers=headers, timeout=timeout)

        logger.debug(
            "Callback responded",
            endpoint=str(url),
            status_code=response.status_code,
        )

        return response


# Global callback client instance
_callback_client: Optional[CallbackClient] = None


def get_callback_client() -> CallbackClient:
    """
    Get global callback client instance.

    Returns:
        CallbackClient instance
    """
    global _callback_client

    if _callback_client is None:
        _callback_client = CallbackClient()

    return _callback_client
