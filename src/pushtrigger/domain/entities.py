"""
Callback Entities

A callback is the resume point of one paused workflow instance: a URL
issued by the workflow engine, possibly carrying inline credentials,
plus the configuration the workflow designer attached to the trigger.
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Optional, TypeVar, Union

import httpx
from pydantic_core import PydanticSerializationError, to_json

from pushtrigger.domain.errors import CallbackConfigurationError, CallbackSerializationError
from pushtrigger.domain.value_objects import NO_OUTPUT, Credentials, build_envelope

if TYPE_CHECKING:
    from pushtrigger.domain.ports.callback_port import ICallbackPort

ConfigT = TypeVar("ConfigT")
OutputT = TypeVar("OutputT")

_ALLOWED_SCHEMES = ("http", "https")

# Set by pushtrigger.infrastructure.dependencies on package import
_default_port_factory: Optional[Callable[[], "ICallbackPort"]] = None


def set_default_callback_port(factory: Optional[Callable[[], "ICallbackPort"]]) -> None:
    """
    Register the delivery port used by callbacks built without one.

    Args:
        factory: Zero-argument callable returning an ICallbackPort, or None
    """
    global _default_port_factory
    _default_port_factory = factory


class Callback(Generic[ConfigT, OutputT]):
    """
    Push trigger callback that can be invoked to resume a workflow.

    Credentials embedded in the URL are never sent in the URL itself.
    They travel only as a Basic Authorization header.

    All derived properties are recomputed from ``endpoint_with_credentials``
    on access, so the URL may be changed freely before invoking.

    Type Parameters:
        ConfigT: Configuration supplied by the workflow designer
        OutputT: Trigger output type passed to ``invoke``
    """

    def __init__(
        self,
        endpoint_with_credentials: Union[httpx.URL, str, None] = None,
        configuration: Optional[ConfigT] = None,
        callback_client: Optional["ICallbackPort"] = None,
    ):
        """
        Create a callback.

        Args:
            endpoint_with_credentials: URL with inline credentials as issued by
                the workflow engine. Must be set before invoking.
            configuration: Configuration for the push trigger
            callback_client: Delivery port, defaults to the registered one
        """
        self._endpoint: Optional[httpx.URL] = None
        self.endpoint_with_credentials = endpoint_with_credentials
        self.configuration = configuration
        self.callback_client = callback_client

    @property
    def endpoint_with_credentials(self) -> Optional[httpx.URL]:
        """Callback URL with inline credentials."""
        return self._endpoint

    @endpoint_with_credentials.setter
    def endpoint_with_credentials(self, value: Union[httpx.URL, str, None]) -> None:
        if value is None or isinstance(value, httpx.URL):
            self._endpoint = value
            return

        try:
            self._endpoint = httpx.URL(value)
        except (httpx.InvalidURL, TypeError) as e:
            raise CallbackConfigurationError(
                f"Invalid callback URL: {e}",
                details={"reason": str(e)},
            ) from e

    @property
    def raw_endpoint(self) -> httpx.URL:
        """
        Callback URL without inline credentials.

        Scheme, host, port, path and query are preserved. The fragment is
        dropped since it never reaches the server.

        Raises:
            CallbackConfigurationError: If no URL has been set
        """
        endpoint = self._require_endpoint()
        return endpoint.copy_with(userinfo=b"", fragment=None)

    @property
    def credentials(self) -> Credentials:
        """Credentials parsed from the user-info of the URL."""
        if self._endpoint is None:
            return Credentials()
        return Credentials.parse(self._endpoint.userinfo.decode("ascii"))

    @property
    def user_name(self) -> Optional[str]:
        """User name parsed out of the callback URL."""
        return self.credentials.user_name

    @property
    def password(self) -> Optional[str]:
        """Password parsed out of the callback URL."""
        return self.credentials.password

    @property
    def authorization_header(self) -> Optional[str]:
        """Basic Authorization header value, or None without credentials."""
        return self.credentials.authorization_header

    def build_envelope(self, output: Any = NO_OUTPUT) -> Dict[str, Any]:
        """Build the JSON envelope for an invocation."""
        return build_envelope(output)

    def build_headers(self) -> Dict[str, str]:
        """Build request headers for an invocation."""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
        }

        authorization = self.authorization_header
        if authorization:
            headers["Authorization"] = authorization

        return headers

    async def invoke(
        self,
        output: Any = NO_OUTPUT,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """
        Invoke the callback, resuming the waiting workflow.

        Without ``output`` the body is ``{"outputs": {}}``. With ``output`` the
        body is ``{"outputs": {"body": <output>}}``, available to the workflow
        as the trigger body.

        Args:
            output: Trigger output; pydantic models, dataclasses, mappings,
                sequences and JSON primitives are supported
            timeout: httpx timeout for this call, client default when omitted

        Returns:
            Response received from the workflow engine, unmodified

        Raises:
            CallbackConfigurationError: If the URL is unset or not http(s), or
                no delivery port is available
            CallbackSerializationError: If the output cannot be serialized
            httpx.HTTPError: On transport failures
        """
        url = self._validated_raw_endpoint()
        content = self._serialize(self.build_envelope(output))
        headers = self.build_headers()

        client = self.callback_client
        if client is None:
            if _default_port_factory is None:
                raise CallbackConfigurationError("No callback client configured")
            client = _default_port_factory()

        return await client.post(url, content, headers, timeout=timeout)

    def _require_endpoint(self) -> httpx.URL:
        if self._endpoint is None:
            raise CallbackConfigurationError("Callback URL has not been set")
        return self._endpoint

    def _validated_raw_endpoint(self) -> httpx.URL:
        endpoint = self._require_endpoint()

        if endpoint.scheme not in _ALLOWED_SCHEMES:
            raise CallbackConfigurationError(
                f"Unsupported callback URL scheme: {endpoint.scheme or '<none>'}",
                details={"scheme": endpoint.scheme},
            )
        if not endpoint.host:
            raise CallbackConfigurationError("Callback URL has no host")

        return self.raw_endpoint

    @staticmethod
    def _serialize(envelope: Dict[str, Any]) -> bytes:
        try:
            return to_json(envelope)
        except PydanticSerializationError as e:
            raise CallbackSerializationError(
                f"Trigger output is not JSON serializable: {e}",
                details={"reason": str(e)},
            ) from e

    def __repr__(self) -> str:
        endpoint = str(self.raw_endpoint) if self._endpoint is not None else None
        return f"Callback(endpoint={endpoint!r}, configuration={self.configuration!r})"
