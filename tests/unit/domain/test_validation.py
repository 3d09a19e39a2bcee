import pytest

from rcs_composer.domain.entities import (
    Carousel,
    CarouselContent,
    MediaContent,
    MessageEnvelope,
    MessageType,
    RichCard,
    RichCardContent,
    TextContent,
)
from rcs_composer.domain.exceptions import CarouselFullError
from rcs_composer.domain.validation import (
    Violation,
    ViolationType,
    is_sendable,
    validate_envelope,
)
from rcs_composer.domain.value_objects import (
    ActionType,
    EmptySuggestions,
    MediaKind,
    MediaRef,
    SuggestedAction,
    SuggestedActions,
    SuggestedReplies,
)


def _types(violations: list[Violation]) -> list[ViolationType]:
    return [v.type for v in violations]


def _card_envelope(card: RichCard) -> MessageEnvelope:
    return MessageEnvelope(content=RichCardContent(card=card))


def _carousel_envelope(*cards: RichCard) -> MessageEnvelope:
    return MessageEnvelope(content=CarouselContent(carousel=Carousel(cards=tuple(cards))))


class TestTextValidation:
    def test_text_over_limit_is_too_long(self):
        violations = validate_envelope(MessageEnvelope(content=TextContent(text="x" * 3073)))

        assert _types(violations) == [ViolationType.TOO_LONG]
        assert violations[0].path == "text"
        assert "3072" in violations[0].message

    def test_text_at_limit_is_sendable(self):
        assert is_sendable(MessageEnvelope(content=TextContent(text="x" * 3072)))

    def test_empty_text_is_not_ready(self):
        violations = validate_envelope(MessageEnvelope())

        assert _types(violations) == [ViolationType.EMPTY]

    def test_fallback_is_not_validated(self):
        envelope = MessageEnvelope(content=TextContent(text="Hi"), fallback="y" * 10_000)

        assert validate_envelope(envelope) == []


class TestRichCardValidation:
    def test_image_without_url_and_no_title_is_incomplete(self):
        card = RichCard(title="", media=MediaRef(kind=MediaKind.IMAGE, url=""))

        violations = validate_envelope(_card_envelope(card))

        assert _types(violations) == [ViolationType.INCOMPLETE_CARD]
        assert violations[0].path == "card"

    def test_complete_card_is_sendable(self, complete_card):
        assert is_sendable(_card_envelope(complete_card))

    def test_card_with_title_and_replies_is_sendable(self):
        card = RichCard(title="Coffee?", suggestions=EmptySuggestions().add_reply("Yes").add_reply("No"))

        assert validate_envelope(_card_envelope(card)) == []

    def test_incomplete_regardless_of_suggestions(self):
        card = RichCard(suggestions=EmptySuggestions().add_reply("Yes"))

        assert _types(validate_envelope(_card_envelope(card))) == [ViolationType.INCOMPLETE_CARD]

    def test_audio_card_media_is_unsupported(self, audio_ref):
        violations = validate_envelope(_card_envelope(RichCard(title="Listen", media=audio_ref)))

        assert _types(violations) == [ViolationType.UNSUPPORTED_MEDIA]
        assert violations[0].path == "card.media"

    def test_card_media_with_mismatched_file_is_unsupported(self):
        media = MediaRef(
            kind=MediaKind.VIDEO,
            url="https://cdn.example.com/clip.gif",
            file_name="clip.gif",
            mime_type="image/gif",
        )

        violations = validate_envelope(_card_envelope(RichCard(title="Clip", media=media)))

        assert _types(violations) == [ViolationType.UNSUPPORTED_MEDIA]
        assert "Allowed types: .h263" in violations[0].message

    def test_directly_built_five_replies_are_too_many(self):
        card = RichCard(title="Pick", suggestions=SuggestedReplies(replies=("a", "b", "c", "d", "e")))

        violations = validate_envelope(_card_envelope(card))

        assert _types(violations) == [ViolationType.TOO_MANY_SUGGESTIONS]
        assert violations[0].path == "card.suggestions"

    def test_blank_reply_is_empty(self):
        card = RichCard(title="Pick", suggestions=SuggestedReplies(replies=("Yes", "  ")))

        violations = validate_envelope(_card_envelope(card))

        assert _types(violations) == [ViolationType.EMPTY]
        assert violations[0].path == "card.suggestions[1]"
        assert violations[0].message == "Reply 2 is empty"

    def test_malformed_open_url_action_is_invalid(self):
        action = SuggestedAction(type=ActionType.OPEN_URL, value="not a url")
        card = RichCard(title="Shop", suggestions=SuggestedActions(actions=(action,)))

        violations = validate_envelope(_card_envelope(card))

        assert _types(violations) == [ViolationType.INVALID_ACTION_VALUE]
        assert violations[0].path == "card.suggestions[0]"
        assert violations[0].message.startswith("Expected a URL")

    @pytest.mark.parametrize(
        "number",
        ["(555) 123-4567", "555 123 4567", "555.123.4567", "+1 (555) 123-4567", "+44 20 7946 0958"],
    )
    def test_common_phone_formats_make_dial_card_sendable(self, number):
        action = SuggestedAction(type=ActionType.DIAL, value=number)
        card = RichCard(title="Call us", suggestions=SuggestedActions(actions=(action,)))

        assert validate_envelope(_card_envelope(card)) == []

    @pytest.mark.parametrize("number", ["(", "()-", "call us"])
    def test_dial_value_without_digits_is_invalid(self, number):
        action = SuggestedAction(type=ActionType.DIAL, value=number)
        card = RichCard(title="Call us", suggestions=SuggestedActions(actions=(action,)))

        violations = validate_envelope(_card_envelope(card))

        assert [v.type for v in violations] == [ViolationType.INVALID_ACTION_VALUE]
        assert violations[0].message.startswith("Expected a phone number")

    def test_violations_follow_field_order(self, audio_ref):
        card = RichCard(
            media=audio_ref,
            suggestions=SuggestedActions(actions=(SuggestedAction(type=ActionType.DIAL, value=""),)),
        )

        violations = validate_envelope(_card_envelope(card))

        assert [(v.path, v.type) for v in violations] == [
            ("card", ViolationType.INCOMPLETE_CARD),
            ("card.media", ViolationType.UNSUPPORTED_MEDIA),
            ("card.suggestions[0]", ViolationType.EMPTY),
        ]


class TestCarouselValidation:
    def test_empty_carousel(self):
        violations = validate_envelope(MessageEnvelope.draft(MessageType.CAROUSEL))

        assert _types(violations) == [ViolationType.EMPTY_CAROUSEL]
        assert violations[0].path == "cards"

    def test_one_violation_per_incomplete_card_in_index_order(self, complete_card):
        envelope = _carousel_envelope(RichCard(), complete_card, RichCard(), RichCard(description="x"))

        violations = validate_envelope(envelope)

        assert [(v.path, v.type) for v in violations] == [
            ("cards[0]", ViolationType.INCOMPLETE_CARD),
            ("cards[2]", ViolationType.INCOMPLETE_CARD),
            ("cards[3]", ViolationType.INCOMPLETE_CARD),
        ]

    def test_complete_carousel_is_sendable(self, complete_card):
        assert is_sendable(_carousel_envelope(complete_card, RichCard(title="Second")))

    def test_carousel_built_through_add_never_has_too_many_cards(self, complete_card):
        carousel = Carousel()
        for _ in range(11):
            try:
                carousel = carousel.add_card(complete_card)
            except CarouselFullError:
                pass

        envelope = MessageEnvelope(content=CarouselContent(carousel=carousel))

        assert ViolationType.TOO_MANY_CARDS not in _types(validate_envelope(envelope))
        assert is_sendable(envelope)

    def test_directly_constructed_eleven_cards_are_too_many(self, complete_card):
        envelope = _carousel_envelope(*([complete_card] * 11))

        assert _types(validate_envelope(envelope)) == [ViolationType.TOO_MANY_CARDS]

    def test_card_violations_are_indexed(self, audio_ref):
        envelope = _carousel_envelope(RichCard(title="a"), RichCard(title="b", media=audio_ref))

        violations = validate_envelope(envelope)

        assert [(v.path, v.type) for v in violations] == [
            ("cards[1].media", ViolationType.UNSUPPORTED_MEDIA),
        ]


class TestMediaValidation:
    @pytest.mark.parametrize("fixture_name", ["image_ref", "video_ref", "audio_ref", "document_ref"])
    def test_every_kind_is_sendable_as_media_message(self, request, fixture_name):
        media = request.getfixturevalue(fixture_name)

        assert is_sendable(MessageEnvelope(content=MediaContent(media=media)))

    def test_media_message_without_upload_is_empty(self):
        violations = validate_envelope(MessageEnvelope.draft(MessageType.MEDIA))

        assert _types(violations) == [ViolationType.EMPTY]
        assert violations[0].path == "media"

    def test_media_with_empty_url_is_empty(self):
        envelope = MessageEnvelope(content=MediaContent(media=MediaRef(kind=MediaKind.DOCUMENT)))

        assert _types(validate_envelope(envelope)) == [ViolationType.EMPTY]

    def test_media_with_mismatched_file_is_unsupported(self):
        media = MediaRef(
            kind=MediaKind.DOCUMENT,
            url="https://cdn.example.com/a.png",
            file_name="a.png",
            mime_type="image/png",
        )

        violations = validate_envelope(MessageEnvelope(content=MediaContent(media=media)))

        assert _types(violations) == [ViolationType.UNSUPPORTED_MEDIA]
        assert violations[0].message == "Invalid file type. Allowed types: .pdf"


class TestValidatorGuarantees:
    def test_validation_is_idempotent(self, audio_ref):
        envelope = _carousel_envelope(RichCard(), RichCard(media=audio_ref))

        assert validate_envelope(envelope) == validate_envelope(envelope)

    def test_unknown_content_is_reported_not_raised(self):
        envelope = MessageEnvelope(content="raw string")  # type: ignore[arg-type]

        violations = validate_envelope(envelope)

        assert _types(violations) == [ViolationType.UNSUPPORTED_CONTENT]

    def test_violation_to_dict(self):
        violation = Violation(path="text", type=ViolationType.EMPTY, message="Text message is empty")

        assert violation.to_dict() == {
            "path": "text",
            "type": "empty",
            "message": "Text message is empty",
        }
