"""Canonical payload DTOs and their mapping to and from the domain model.

Parsing is structural only: over-long text, too many cards or suggestions are
accepted here and reported by validation. A card carrying both replies and
actions cannot be represented in the domain and is rejected at parse time.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from ...domain.entities import (
    Carousel,
    CarouselContent,
    MediaContent,
    MessageEnvelope,
    RichCard,
    RichCardContent,
    TextContent,
)
from ...domain.exceptions import MixedSuggestionKindsError
from ...domain.validation import Violation
from ...domain.value_objects import (
    ActionType,
    EmptySuggestions,
    MediaKind,
    MediaRef,
    SuggestedAction,
    SuggestedActions,
    SuggestedReplies,
    SuggestionSet,
)


class MediaPayload(BaseModel):
    kind: MediaKind
    url: str = ""
    size_bytes: int | None = Field(None, ge=0)
    file_name: str | None = None
    mime_type: str | None = None

    def to_domain(self) -> MediaRef:
        return MediaRef(
            kind=self.kind,
            url=self.url,
            size_bytes=self.size_bytes,
            file_name=self.file_name,
            mime_type=self.mime_type,
        )

    @classmethod
    def from_domain(cls, media: MediaRef) -> "MediaPayload":
        return cls(
            kind=media.kind,
            url=media.url,
            size_bytes=media.size_bytes,
            file_name=media.file_name,
            mime_type=media.mime_type,
        )


class ActionPayload(BaseModel):
    type: ActionType = ActionType.TEXT
    value: str = ""


class RichCardPayload(BaseModel):
    title: str = ""
    description: str = ""
    media: MediaPayload | None = None
    suggested_replies: list[str] = Field(default_factory=list)
    suggested_actions: list[ActionPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_single_suggestion_kind(self) -> "RichCardPayload":
        if self.suggested_replies and self.suggested_actions:
            raise MixedSuggestionKindsError("replies", "actions")
        return self

    def to_domain(self) -> RichCard:
        suggestions: SuggestionSet = EmptySuggestions()
        if self.suggested_replies:
            suggestions = SuggestedReplies(replies=tuple(self.suggested_replies))
        elif self.suggested_actions:
            suggestions = SuggestedActions(
                actions=tuple(SuggestedAction(type=a.type, value=a.value) for a in self.suggested_actions)
            )
        # Constructed directly: card media kind is reported by validation, not rejected
        return RichCard(
            title=self.title,
            description=self.description,
            media=self.media.to_domain() if self.media else None,
            suggestions=suggestions,
        )

    @classmethod
    def from_domain(cls, card: RichCard) -> "RichCardPayload":
        suggestions = card.suggestions
        return cls(
            title=card.title,
            description=card.description,
            media=MediaPayload.from_domain(card.media) if card.media else None,
            suggested_replies=list(suggestions.replies) if isinstance(suggestions, SuggestedReplies) else [],
            suggested_actions=[
                ActionPayload(type=a.type, value=a.value) for a in suggestions.actions
            ]
            if isinstance(suggestions, SuggestedActions)
            else [],
        )


class _EnvelopePayloadBase(BaseModel):
    fallback: str | None = None


class TextMessagePayload(_EnvelopePayloadBase):
    type: Literal["text"] = "text"
    text: str = ""

    def to_domain(self) -> MessageEnvelope:
        return MessageEnvelope(content=TextContent(text=self.text), fallback=self.fallback)


class RichCardMessagePayload(_EnvelopePayloadBase):
    type: Literal["rich_card"] = "rich_card"
    card: RichCardPayload = Field(default_factory=RichCardPayload)

    def to_domain(self) -> MessageEnvelope:
        return MessageEnvelope(
            content=RichCardContent(card=self.card.to_domain()),
            fallback=self.fallback,
        )


class CarouselMessagePayload(_EnvelopePayloadBase):
    type: Literal["carousel"] = "carousel"
    cards: list[RichCardPayload] = Field(default_factory=list)

    def to_domain(self) -> MessageEnvelope:
        carousel = Carousel(cards=tuple(card.to_domain() for card in self.cards))
        return MessageEnvelope(content=CarouselContent(carousel=carousel), fallback=self.fallback)


class MediaMessagePayload(_EnvelopePayloadBase):
    type: Literal["media"] = "media"
    media: MediaPayload | None = None

    def to_domain(self) -> MessageEnvelope:
        return MessageEnvelope(
            content=MediaContent(media=self.media.to_domain() if self.media else None),
            fallback=self.fallback,
        )


EnvelopePayload = Annotated[
    Union[TextMessagePayload, RichCardMessagePayload, CarouselMessagePayload, MediaMessagePayload],
    Field(discriminator="type"),
]

_envelope_adapter: TypeAdapter = TypeAdapter(EnvelopePayload)


def payload_from_envelope(envelope: MessageEnvelope):
    """Map a domain envelope onto its payload model."""
    content = envelope.content
    if isinstance(content, TextContent):
        return TextMessagePayload(text=content.text, fallback=envelope.fallback)
    if isinstance(content, RichCardContent):
        return RichCardMessagePayload(
            card=RichCardPayload.from_domain(content.card), fallback=envelope.fallback
        )
    if isinstance(content, CarouselContent):
        return CarouselMessagePayload(
            cards=[RichCardPayload.from_domain(card) for card in content.carousel.cards],
            fallback=envelope.fallback,
        )
    if isinstance(content, MediaContent):
        return MediaMessagePayload(
            media=MediaPayload.from_domain(content.media) if content.media else None,
            fallback=envelope.fallback,
        )
    raise TypeError(f"Unsupported message content: {type(content).__name__}")


def serialize_envelope(envelope: MessageEnvelope) -> dict[str, Any]:
    """Canonical payload handed to the transport: variant tag plus fields, no nulls."""
    return payload_from_envelope(envelope).model_dump(mode="json", exclude_none=True)


def parse_envelope(data: dict[str, Any]) -> MessageEnvelope:
    """Inverse of serialize_envelope; raises pydantic.ValidationError on bad shape."""
    return _envelope_adapter.validate_python(data).to_domain()


class MessageRequestDTO(BaseModel):
    """Request body wrapping a message payload."""

    message: EnvelopePayload


class ViolationDTO(BaseModel):
    path: str
    type: str
    message: str

    @classmethod
    def from_domain(cls, violation: Violation) -> "ViolationDTO":
        return cls(path=violation.path, type=violation.type.value, message=violation.message)


class ValidationResultDTO(BaseModel):
    sendable: bool
    message_type: str
    violations: list[ViolationDTO] = Field(default_factory=list)


class MediaUploadDTO(BaseModel):
    """An uploaded file as reported by the upload collaborator."""

    file_name: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)
    kind: MediaKind
    url: str = Field(..., min_length=1)
    size_bytes: int | None = Field(None, ge=0)
    allowed_kinds: list[MediaKind] = Field(default_factory=lambda: list(MediaKind))
