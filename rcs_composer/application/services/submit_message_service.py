from typing import Any

import structlog

from ...domain.entities import MessageEnvelope
from ...domain.exceptions import NotSendableError
from ...domain.validation import validate_envelope
from ..dtos import serialize_envelope
from ..ports.inbound import SubmitMessageUseCase
from ..ports.outbound import MessageDispatcher

logger = structlog.get_logger()


class SubmitMessageService(SubmitMessageUseCase):
    """Hands sendable envelopes to the transport; refuses anything else."""

    def __init__(self, dispatcher: MessageDispatcher) -> None:
        self._dispatcher = dispatcher

    async def execute(self, envelope: MessageEnvelope) -> dict[str, Any]:
        violations = validate_envelope(envelope)
        if violations:
            logger.warning(
                "Message not sendable",
                message_type=envelope.message_type.value,
                violations=[v.type.value for v in violations],
            )
            raise NotSendableError(violations)

        payload = serialize_envelope(envelope)
        await self._dispatcher.dispatch(payload)

        logger.info(
            "Message dispatched",
            message_type=envelope.message_type.value,
            has_fallback=envelope.fallback is not None,
        )
        return payload
