"""
Callback Value Objects

Immutable value objects derived from a callback URL, and the JSON
envelope shape expected by the workflow engine.
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import unquote


class _NoOutput:
    """Marker for an invocation without trigger output."""

    def __repr__(self) -> str:
        return "NO_OUTPUT"


# None is a valid trigger output (JSON null), so absence needs its own marker
NO_OUTPUT: Any = _NoOutput()


@dataclass(frozen=True)
class Credentials:
    """
    Basic-auth credentials embedded in the user-info of a callback URL.

    Attributes:
        user_name: First colon-delimited segment of the user-info
        password: Remaining segments concatenated together
    """

    user_name: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def parse(cls, userinfo: Optional[str]) -> "Credentials":
        """
        Parse raw (percent-encoded) user-info into credentials.

        Segments are percent-decoded, then empty or whitespace-only ones
        are discarded, so ``"u::p"`` gives ``u`` / ``p`` and ``"%20"`` gives
        nothing.
        Segments after the first are concatenated without separators:
        ``"u:p1:p2"`` gives the password ``p1p2``. User-info without a
        colon yields a user name and no password.

        Args:
            userinfo: User-info component as it appears in the URL

        Returns:
            Parsed credentials, both parts None for blank user-info
        """
        if not userinfo or not userinfo.strip():
            return cls()

        segments = [s for s in (unquote(part) for part in userinfo.split(":")) if s.strip()]
        if not segments:
            return cls()

        password = "".join(segments[1:]) if len(segments) > 1 else None
        return cls(user_name=segments[0], password=password)

    @property
    def is_complete(self) -> bool:
        """Both user name and password are present and non-blank."""
        return bool(
            self.user_name and self.user_name.strip()
            and self.password and self.password.strip()
        )

    @property
    def authorization_header(self) -> Optional[str]:
        """Basic authorization header value, or None when incomplete."""
        if not self.is_complete:
            return None

        token = f"{self.user_name}:{self.password}".encode("utf-8")
        return f"Basic {base64.b64encode(token).decode('ascii')}"

    def __repr__(self) -> str:
        masked = "***" if self.password is not None else None
        return f"Credentials(user_name={self.user_name!r}, password={masked!r})"


def build_envelope(output: Any = NO_OUTPUT) -> Dict[str, Any]:
    """
    Build the invocation envelope.

    Args:
        output: Trigger output, omitted for a bare resume

    Returns:
        ``{"outputs": {}}`` or ``{"outputs": {"body": output}}``
    """
    if output is NO_OUTPUT:
        return {"outputs": {}}
    return {"outputs": {"body": output}}
