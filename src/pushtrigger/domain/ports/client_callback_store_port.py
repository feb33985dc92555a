"""
Client Callback Store Port Interface

Read side of the callback registry, used by the event source that
invokes callbacks when something happens.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from pushtrigger.domain.entities import Callback

ConfigT = TypeVar("ConfigT")
OutputT = TypeVar("OutputT")


class IClientCallbackStore(ABC, Generic[ConfigT, OutputT]):
    """
    Port interface for reading callback registrations.

    Type Parameters:
        ConfigT: Configuration supplied by the workflow designer
        OutputT: Trigger output type, ``Any`` when not constrained
    """

    @abstractmethod
    async def read_callbacks(self) -> Iterable[Callback[ConfigT, OutputT]]:
        """
        Read every callback currently available for invocation.

        Returns:
            Finite snapshot of callbacks taken at call time
        """
        pass
