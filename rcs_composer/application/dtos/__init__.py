from .message_dto import (
    ActionPayload,
    CarouselMessagePayload,
    EnvelopePayload,
    MediaMessagePayload,
    MediaPayload,
    MediaUploadDTO,
    MessageRequestDTO,
    RichCardMessagePayload,
    RichCardPayload,
    TextMessagePayload,
    ValidationResultDTO,
    ViolationDTO,
    parse_envelope,
    payload_from_envelope,
    serialize_envelope,
)

__all__ = [
    "ActionPayload",
    "CarouselMessagePayload",
    "EnvelopePayload",
    "MediaMessagePayload",
    "MediaPayload",
    "MediaUploadDTO",
    "MessageRequestDTO",
    "RichCardMessagePayload",
    "RichCardPayload",
    "TextMessagePayload",
    "ValidationResultDTO",
    "ViolationDTO",
    "parse_envelope",
    "payload_from_envelope",
    "serialize_envelope",
]
