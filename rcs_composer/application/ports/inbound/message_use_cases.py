from abc import ABC, abstractmethod
from typing import Any

from ....domain.entities import MessageEnvelope
from ....domain.value_objects import MediaRef
from ...dtos import MediaUploadDTO, ValidationResultDTO


class ValidateMessageUseCase(ABC):
    """Input port for validating a draft envelope."""

    @abstractmethod
    def execute(self, envelope: MessageEnvelope) -> ValidationResultDTO:
        """Report every violation of the envelope's active variant."""
        ...


class SubmitMessageUseCase(ABC):
    """Input port for handing a sendable envelope to the transport."""

    @abstractmethod
    async def execute(self, envelope: MessageEnvelope) -> dict[str, Any]:
        """Validate, serialize and dispatch; returns the dispatched payload."""
        ...


class CheckMediaUseCase(ABC):
    """Input port for accepting an uploaded file as message media."""

    @abstractmethod
    def execute(self, dto: MediaUploadDTO) -> MediaRef:
        """Check the file against its declared kind and build a media reference."""
        ...
