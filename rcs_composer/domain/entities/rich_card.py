from dataclasses import dataclass, field, replace

from ..exceptions import UnsupportedKindError
from ..value_objects import (
    VISUAL_MEDIA_KINDS,
    EmptySuggestions,
    MediaKind,
    MediaRef,
    SuggestionSet,
)


def _check_card_media(media: MediaRef | None) -> None:
    if media is not None and media.kind not in VISUAL_MEDIA_KINDS:
        raise UnsupportedKindError(media.kind, [k for k in MediaKind if k in VISUAL_MEDIA_KINDS])


@dataclass(frozen=True)
class RichCard:
    """Title, description, visual media and suggestions shown as one card.

    Incomplete cards are legal drafts; completeness is reported by validation.
    """

    title: str = ""
    description: str = ""
    media: MediaRef | None = None
    suggestions: SuggestionSet = field(default_factory=EmptySuggestions)

    @classmethod
    def build(
        cls,
        title: str = "",
        description: str = "",
        media: MediaRef | None = None,
        suggestions: SuggestionSet | None = None,
    ) -> "RichCard":
        """Factory method that rejects non-visual card media."""
        _check_card_media(media)
        return cls(
            title=title,
            description=description,
            media=media,
            suggestions=suggestions if suggestions is not None else EmptySuggestions(),
        )

    @property
    def has_visual_media(self) -> bool:
        return (
            self.media is not None
            and bool(self.media.url)
            and self.media.kind in VISUAL_MEDIA_KINDS
        )

    @property
    def is_complete(self) -> bool:
        """A card needs a title or uploaded image/video to be meaningful."""
        return bool(self.title) or self.has_visual_media

    def with_title(self, title: str) -> "RichCard":
        return replace(self, title=title)

    def with_description(self, description: str) -> "RichCard":
        return replace(self, description=description)

    def with_media(self, media: MediaRef | None) -> "RichCard":
        _check_card_media(media)
        return replace(self, media=media)

    def with_suggestions(self, suggestions: SuggestionSet) -> "RichCard":
        return replace(self, suggestions=suggestions)


def is_complete(card: RichCard) -> bool:
    return card.is_complete
