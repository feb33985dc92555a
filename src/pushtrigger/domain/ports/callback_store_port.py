"""
Callback Store Port Interface

Write side of the callback registry, used by the party that receives
push trigger subscriptions from the workflow engine.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Union

import httpx

ConfigT = TypeVar("ConfigT")


class ICallbackStore(ABC, Generic[ConfigT]):
    """
    Port interface for storing callback registrations.

    Type Parameters:
        ConfigT: Configuration supplied by the workflow designer
    """

    @abstractmethod
    async def write_callback(
        self,
        trigger_id: str,
        callback_url: Union[httpx.URL, str],
        trigger_config: ConfigT,
    ) -> None:
        """
        Persist or overwrite the callback registered for a trigger.

        Args:
            trigger_id: Name of the workflow instance the callback belongs to
            callback_url: URL with inline credentials as issued by the engine
            trigger_config: Configuration for the push trigger
        """
        pass

    @abstractmethod
    async def delete_callback(self, trigger_id: str) -> None:
        """
        Remove the callback registered for a trigger.

        Args:
            trigger_id: Name of the workflow instance the callback belongs to
        """
        pass
