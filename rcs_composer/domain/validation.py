"""
Envelope validation.

validate_envelope never raises: every problem in a draft is returned as a
Violation, ordered by the variant's field order (title before media before
suggestions, carousel cards by index). An envelope is sendable only when the
list is empty.
"""

from dataclasses import dataclass
from enum import Enum

from .entities import (
    MAX_CAROUSEL_CARDS,
    MAX_TEXT_LENGTH,
    CarouselContent,
    MediaContent,
    MessageEnvelope,
    RichCard,
    RichCardContent,
    TextContent,
)
from .exceptions import MediaError
from .value_objects import (
    ALL_MEDIA_KINDS,
    MAX_SUGGESTIONS,
    VISUAL_MEDIA_KINDS,
    MediaRef,
    SuggestedAction,
    SuggestedReplies,
)


class ViolationType(str, Enum):
    """Kinds of validation violations."""

    TOO_LONG = "too_long"
    EMPTY = "empty"
    EMPTY_CAROUSEL = "empty_carousel"
    TOO_MANY_CARDS = "too_many_cards"
    INCOMPLETE_CARD = "incomplete_card"
    UNSUPPORTED_MEDIA = "unsupported_media"
    TOO_MANY_SUGGESTIONS = "too_many_suggestions"
    INVALID_ACTION_VALUE = "invalid_action_value"
    UNSUPPORTED_CONTENT = "unsupported_content"


@dataclass(frozen=True)
class Violation:
    """One problem found in a draft."""

    path: str
    type: ViolationType
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "type": self.type.value, "message": self.message}


def validate_envelope(envelope: MessageEnvelope) -> list[Violation]:
    """Return every violation of the envelope's active variant."""
    content = envelope.content

    if isinstance(content, TextContent):
        return _text_violations(content.text)
    if isinstance(content, RichCardContent):
        return _card_violations(content.card, "card")
    if isinstance(content, CarouselContent):
        return _carousel_violations(content.carousel.cards)
    if isinstance(content, MediaContent):
        return _media_content_violations(content.media)

    return [
        Violation(
            path="content",
            type=ViolationType.UNSUPPORTED_CONTENT,
            message=f"Unsupported message content: {type(content).__name__}",
        )
    ]


def is_sendable(envelope: MessageEnvelope) -> bool:
    return not validate_envelope(envelope)


def _text_violations(text: str) -> list[Violation]:
    if len(text) > MAX_TEXT_LENGTH:
        return [
            Violation(
                path="text",
                type=ViolationType.TOO_LONG,
                message=f"Text must be at most {MAX_TEXT_LENGTH} characters (got {len(text)})",
            )
        ]
    if not text:
        return [Violation(path="text", type=ViolationType.EMPTY, message="Text message is empty")]
    return []


def _carousel_violations(cards: tuple[RichCard, ...]) -> list[Violation]:
    violations: list[Violation] = []

    if not cards:
        violations.append(
            Violation(
                path="cards",
                type=ViolationType.EMPTY_CAROUSEL,
                message="Carousel needs at least one card",
            )
        )
    elif len(cards) > MAX_CAROUSEL_CARDS:
        violations.append(
            Violation(
                path="cards",
                type=ViolationType.TOO_MANY_CARDS,
                message=f"Carousel can hold at most {MAX_CAROUSEL_CARDS} cards (got {len(cards)})",
            )
        )

    for index, card in enumerate(cards):
        violations.extend(_card_violations(card, f"cards[{index}]"))

    return violations


def _card_violations(card: RichCard, path: str) -> list[Violation]:
    violations: list[Violation] = []

    if not card.is_complete:
        violations.append(
            Violation(
                path=path,
                type=ViolationType.INCOMPLETE_CARD,
                message="Card needs a title or an uploaded image or video",
            )
        )

    if card.media is not None:
        problem = _media_problem(card.media, VISUAL_MEDIA_KINDS)
        if problem:
            violations.append(
                Violation(path=f"{path}.media", type=ViolationType.UNSUPPORTED_MEDIA, message=problem)
            )

    violations.extend(_suggestion_violations(card, f"{path}.suggestions"))
    return violations


def _suggestion_violations(card: RichCard, path: str) -> list[Violation]:
    violations: list[Violation] = []
    items = card.suggestions.items

    if len(items) > MAX_SUGGESTIONS:
        violations.append(
            Violation(
                path=path,
                type=ViolationType.TOO_MANY_SUGGESTIONS,
                message=f"A card can hold at most {MAX_SUGGESTIONS} suggestions (got {len(items)})",
            )
        )

    noun = "Reply" if isinstance(card.suggestions, SuggestedReplies) else "Action"
    for index, item in enumerate(items):
        item_path = f"{path}[{index}]"
        value = item.value if isinstance(item, SuggestedAction) else item
        if not value.strip():
            violations.append(
                Violation(
                    path=item_path,
                    type=ViolationType.EMPTY,
                    message=f"{noun} {index + 1} is empty",
                )
            )
            continue
        if isinstance(item, SuggestedAction):
            problem = item.value_problem()
            if problem:
                violations.append(
                    Violation(
                        path=item_path,
                        type=ViolationType.INVALID_ACTION_VALUE,
                        message=f"Expected a {item.label}: {problem}",
                    )
                )

    return violations


def _media_content_violations(media: MediaRef | None) -> list[Violation]:
    if media is None or not media.url:
        return [Violation(path="media", type=ViolationType.EMPTY, message="No media uploaded")]

    problem = _media_problem(media, ALL_MEDIA_KINDS)
    if problem:
        return [Violation(path="media", type=ViolationType.UNSUPPORTED_MEDIA, message=problem)]
    return []


def _media_problem(media: MediaRef, allowed_kinds) -> str | None:
    try:
        media.recheck(allowed_kinds)
    except MediaError as e:
        return e.message
    return None
