from collections.abc import Callable
from functools import wraps

import structlog

from ...domain.entities import (
    CarouselContent,
    MediaContent,
    MessageEnvelope,
    MessageType,
    RichCard,
    TextContent,
)
from ...domain.exceptions import ComposerError, VariantMismatchError
from ...domain.value_objects import ALL_MEDIA_KINDS, MediaRef, SuggestedAction, SuggestionSet

logger = structlog.get_logger()


def _edit(operation: str):
    """Log rejected edits and re-raise; the caller keeps its previous envelope."""

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(self, envelope: MessageEnvelope, *args, **kwargs) -> MessageEnvelope:
            try:
                updated = func(self, envelope, *args, **kwargs)
            except ComposerError as e:
                logger.warning(
                    "Edit rejected",
                    operation=operation,
                    message_type=envelope.message_type.value,
                    code=e.code,
                    reason=e.message,
                )
                raise
            logger.debug("Edit applied", operation=operation, message_type=updated.message_type.value)
            return updated

        return wrapper

    return decorator


class ComposeMessageService:
    """Field-level edits on a draft envelope.

    Every method takes the current snapshot and returns a new one, or raises a
    ComposerError and leaves the snapshot as it was. Card edits target the
    single card of a rich card message, or the carousel card at card_index.
    Only set_variant changes the message type.
    """

    def new_draft(self, message_type: MessageType = MessageType.TEXT) -> MessageEnvelope:
        return MessageEnvelope.draft(message_type)

    @_edit("set_variant")
    def set_variant(self, envelope: MessageEnvelope, message_type: MessageType) -> MessageEnvelope:
        return envelope.switch_to(message_type)

    @_edit("set_text")
    def set_text(self, envelope: MessageEnvelope, text: str) -> MessageEnvelope:
        self._require_variant(envelope, MessageType.TEXT, "set the text")
        return envelope.with_content(TextContent(text=text))

    @_edit("set_fallback")
    def set_fallback(self, envelope: MessageEnvelope, fallback: str | None) -> MessageEnvelope:
        return envelope.with_fallback(fallback or None)

    @_edit("set_media")
    def set_media(self, envelope: MessageEnvelope, media: MediaRef) -> MessageEnvelope:
        self._require_variant(envelope, MessageType.MEDIA, "set the media")
        media.recheck(ALL_MEDIA_KINDS)
        return envelope.with_content(MediaContent(media=media))

    # Card fields

    @_edit("set_title")
    def set_title(
        self, envelope: MessageEnvelope, title: str, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_card(envelope, card_index, lambda card: card.with_title(title))

    @_edit("set_description")
    def set_description(
        self, envelope: MessageEnvelope, description: str, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_card(envelope, card_index, lambda card: card.with_description(description))

    @_edit("set_card_media")
    def set_card_media(
        self, envelope: MessageEnvelope, media: MediaRef | None, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_card(envelope, card_index, lambda card: card.with_media(media))

    # Suggestions

    @_edit("add_reply")
    def add_reply(
        self, envelope: MessageEnvelope, text: str, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.add_reply(text))

    @_edit("add_action")
    def add_action(
        self, envelope: MessageEnvelope, action: SuggestedAction, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.add_action(action))

    @_edit("update_suggestion")
    def update_suggestion(
        self,
        envelope: MessageEnvelope,
        index: int,
        value: str | SuggestedAction,
        card_index: int | None = None,
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.update(index, value))

    @_edit("remove_suggestion")
    def remove_suggestion(
        self, envelope: MessageEnvelope, index: int, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.remove(index))

    @_edit("move_suggestion")
    def move_suggestion(
        self, envelope: MessageEnvelope, index: int, new_index: int, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.move(index, new_index))

    @_edit("clear_suggestions")
    def clear_suggestions(
        self, envelope: MessageEnvelope, card_index: int | None = None
    ) -> MessageEnvelope:
        return self._edit_suggestions(envelope, card_index, lambda s: s.clear())

    # Carousel

    @_edit("add_card")
    def add_card(self, envelope: MessageEnvelope, card: RichCard | None = None) -> MessageEnvelope:
        content = self._carousel_content(envelope, "add a card")
        return envelope.with_content(CarouselContent(carousel=content.carousel.add_card(card)))

    @_edit("remove_card")
    def remove_card(self, envelope: MessageEnvelope, card_index: int) -> MessageEnvelope:
        content = self._carousel_content(envelope, "remove a card")
        return envelope.with_content(
            CarouselContent(carousel=content.carousel.remove_card(card_index))
        )

    @_edit("move_card")
    def move_card(self, envelope: MessageEnvelope, card_index: int, new_index: int) -> MessageEnvelope:
        content = self._carousel_content(envelope, "move a card")
        return envelope.with_content(
            CarouselContent(carousel=content.carousel.move_card(card_index, new_index))
        )

    def _require_variant(
        self, envelope: MessageEnvelope, message_type: MessageType, operation: str
    ) -> None:
        if envelope.message_type is not message_type:
            raise VariantMismatchError(operation, envelope.message_type)

    def _carousel_content(self, envelope: MessageEnvelope, operation: str) -> CarouselContent:
        self._require_variant(envelope, MessageType.CAROUSEL, operation)
        return envelope.content

    def _edit_card(
        self,
        envelope: MessageEnvelope,
        card_index: int | None,
        change: Callable[[RichCard], RichCard],
    ) -> MessageEnvelope:
        card = envelope.card(card_index)
        return envelope.replace_card(change(card), card_index)

    def _edit_suggestions(
        self,
        envelope: MessageEnvelope,
        card_index: int | None,
        change: Callable[[SuggestionSet], SuggestionSet],
    ) -> MessageEnvelope:
        return self._edit_card(
            envelope, card_index, lambda card: card.with_suggestions(change(card.suggestions))
        )
