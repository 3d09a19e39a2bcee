from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Union

from ..exceptions import VariantMismatchError
from ..value_objects import MediaRef
from .carousel import Carousel
from .rich_card import RichCard

MAX_TEXT_LENGTH = 3072


class MessageType(str, Enum):
    TEXT = "text"
    RICH_CARD = "rich_card"
    CAROUSEL = "carousel"
    MEDIA = "media"


@dataclass(frozen=True)
class TextContent:
    message_type: ClassVar[MessageType] = MessageType.TEXT
    text: str = ""


@dataclass(frozen=True)
class RichCardContent:
    message_type: ClassVar[MessageType] = MessageType.RICH_CARD
    card: RichCard = field(default_factory=RichCard)


@dataclass(frozen=True)
class CarouselContent:
    message_type: ClassVar[MessageType] = MessageType.CAROUSEL
    carousel: Carousel = field(default_factory=Carousel)


@dataclass(frozen=True)
class MediaContent:
    message_type: ClassVar[MessageType] = MessageType.MEDIA
    media: MediaRef | None = None


MessageContent = Union[TextContent, RichCardContent, CarouselContent, MediaContent]

CONTENT_TYPES: dict[MessageType, type] = {
    MessageType.TEXT: TextContent,
    MessageType.RICH_CARD: RichCardContent,
    MessageType.CAROUSEL: CarouselContent,
    MessageType.MEDIA: MediaContent,
}


@dataclass(frozen=True)
class MessageEnvelope:
    """Outbound message aggregate: one content variant plus optional fallback text.

    Envelopes are snapshots. Every edit returns a new envelope and leaves the
    original untouched.
    """

    content: MessageContent = field(default_factory=TextContent)
    fallback: str | None = None

    @classmethod
    def draft(cls, message_type: MessageType = MessageType.TEXT) -> "MessageEnvelope":
        """Factory method for an empty draft of the given variant."""
        return cls(content=CONTENT_TYPES[message_type]())

    @property
    def message_type(self) -> MessageType:
        return self.content.message_type

    def switch_to(self, message_type: MessageType) -> "MessageEnvelope":
        """Start a fresh draft of another variant, keeping the fallback text."""
        if message_type == self.message_type:
            return self
        return replace(self, content=CONTENT_TYPES[message_type]())

    def with_content(self, content: MessageContent) -> "MessageEnvelope":
        return replace(self, content=content)

    def with_fallback(self, fallback: str | None) -> "MessageEnvelope":
        return replace(self, fallback=fallback)

    def card(self, card_index: int | None = None) -> RichCard:
        """The single card, or the carousel card at card_index."""
        content = self.content
        if isinstance(content, RichCardContent):
            return content.card
        if isinstance(content, CarouselContent):
            if card_index is None:
                raise VariantMismatchError("edit a card without a card index", self.message_type)
            return content.carousel.card_at(card_index)
        raise VariantMismatchError("edit a card", self.message_type)

    def replace_card(self, card: RichCard, card_index: int | None = None) -> "MessageEnvelope":
        content = self.content
        if isinstance(content, RichCardContent):
            return self.with_content(RichCardContent(card=card))
        if isinstance(content, CarouselContent):
            if card_index is None:
                raise VariantMismatchError("edit a card without a card index", self.message_type)
            return self.with_content(
                CarouselContent(carousel=content.carousel.replace_card(card_index, card))
            )
        raise VariantMismatchError("edit a card", self.message_type)
