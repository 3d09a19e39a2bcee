from .carousel import MAX_CAROUSEL_CARDS, Carousel
from .envelope import (
    MAX_TEXT_LENGTH,
    CarouselContent,
    MediaContent,
    MessageContent,
    MessageEnvelope,
    MessageType,
    RichCardContent,
    TextContent,
)
from .rich_card import RichCard, is_complete

__all__ = [
    "Carousel",
    "CarouselContent",
    "MAX_CAROUSEL_CARDS",
    "MAX_TEXT_LENGTH",
    "MediaContent",
    "MessageContent",
    "MessageEnvelope",
    "MessageType",
    "RichCard",
    "RichCardContent",
    "TextContent",
    "is_complete",
]
