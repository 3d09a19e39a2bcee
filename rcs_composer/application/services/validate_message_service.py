import structlog

from ...domain.entities import MessageEnvelope
from ...domain.validation import validate_envelope
from ...infrastructure.logging import Timer
from ..dtos import ValidationResultDTO, ViolationDTO
from ..ports.inbound import ValidateMessageUseCase

logger = structlog.get_logger()


class ValidateMessageService(ValidateMessageUseCase):
    """Service implementing the validate message use case."""

    def execute(self, envelope: MessageEnvelope) -> ValidationResultDTO:
        with Timer() as t:
            violations = validate_envelope(envelope)

        logger.info(
            "Message validated",
            message_type=envelope.message_type.value,
            violation_count=len(violations),
            duration_ms=t.duration_ms,
        )

        return ValidationResultDTO(
            sendable=not violations,
            message_type=envelope.message_type.value,
            violations=[ViolationDTO.from_domain(v) for v in violations],
        )
