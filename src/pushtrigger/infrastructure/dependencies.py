"""
Dependency wiring

Binds domain ports to their infrastructure implementations.
"""

from pushtrigger.domain.entities import set_default_callback_port
from pushtrigger.infrastructure.http import get_callback_client


def configure_dependencies() -> None:
    """Use the global httpx CallbackClient for callbacks built without a port."""
    set_default_callback_port(get_callback_client)
