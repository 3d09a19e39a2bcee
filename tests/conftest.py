import pytest

from rcs_composer.application.services import ComposeMessageService
from rcs_composer.domain.entities import MessageEnvelope, MessageType, RichCard
from rcs_composer.domain.value_objects import MediaKind, MediaRef


@pytest.fixture
def image_ref() -> MediaRef:
    return MediaRef(
        kind=MediaKind.IMAGE,
        url="https://cdn.example.com/promo.png",
        size_bytes=2048,
        file_name="promo.png",
        mime_type="image/png",
    )


@pytest.fixture
def video_ref() -> MediaRef:
    return MediaRef(
        kind=MediaKind.VIDEO,
        url="https://cdn.example.com/teaser.mp4",
        file_name="teaser.mp4",
        mime_type="video/mp4",
    )


@pytest.fixture
def audio_ref() -> MediaRef:
    return MediaRef(
        kind=MediaKind.AUDIO,
        url="https://cdn.example.com/jingle.mp3",
        file_name="jingle.mp3",
        mime_type="audio/mpeg",
    )


@pytest.fixture
def document_ref() -> MediaRef:
    return MediaRef(
        kind=MediaKind.DOCUMENT,
        url="https://cdn.example.com/terms.pdf",
        file_name="terms.pdf",
        mime_type="application/pdf",
    )


@pytest.fixture
def complete_card(image_ref) -> RichCard:
    return RichCard(title="Summer sale", description="Up to 50% off", media=image_ref)


@pytest.fixture
def composer() -> ComposeMessageService:
    return ComposeMessageService()


@pytest.fixture
def card_draft() -> MessageEnvelope:
    return MessageEnvelope.draft(MessageType.RICH_CARD)


@pytest.fixture
def carousel_draft() -> MessageEnvelope:
    return MessageEnvelope.draft(MessageType.CAROUSEL)
