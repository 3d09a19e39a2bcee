from abc import ABC, abstractmethod
from typing import Any


class MessageDispatcher(ABC):
    """Output port for the transport collaborator that sends a payload."""

    @abstractmethod
    async def dispatch(self, payload: dict[str, Any]) -> None:
        """Hand a serialized, validated message payload to the transport."""
        ...
