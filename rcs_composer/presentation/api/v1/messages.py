from fastapi import APIRouter, Depends

from ....application.dtos import MessageRequestDTO, ValidationResultDTO, serialize_envelope
from ....application.services import ValidateMessageService
from ....domain.exceptions import NotSendableError
from ....domain.validation import validate_envelope
from ..dependencies import get_validate_service
from ..errors import unprocessable

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post(
    "/validate",
    response_model=ValidationResultDTO,
    summary="Validate a message",
    description="Report every violation of the message's active variant.",
)
async def validate_message(
    request: MessageRequestDTO,
    service: ValidateMessageService = Depends(get_validate_service),
) -> ValidationResultDTO:
    return service.execute(request.message.to_domain())


@router.post(
    "/payload",
    response_model=dict,
    summary="Build the transport payload",
    description="Return the canonical payload of a sendable message.",
)
async def build_payload(request: MessageRequestDTO) -> dict:
    """Serialize a message; rejected with its violations when not sendable."""
    envelope = request.message.to_domain()
    violations = validate_envelope(envelope)
    if violations:
        raise unprocessable(NotSendableError(violations))
    return serialize_envelope(envelope)
