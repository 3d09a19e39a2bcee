from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..exceptions import (
    ExtensionMismatchError,
    MediaTooLargeError,
    MimeMismatchError,
    UnsupportedKindError,
)

MAX_UPLOAD_BYTES = 200 * 1024 * 1024


class MediaKind(str, Enum):
    """Semantic media category governing allowed extensions and MIME types."""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"


MEDIA_EXTENSIONS: dict[MediaKind, tuple[str, ...]] = {
    MediaKind.IMAGE: (".jpeg", ".jpg", ".gif", ".png"),
    MediaKind.VIDEO: (".h263", ".m4v", ".mp4", ".mpeg", ".mpg", ".webm"),
    MediaKind.AUDIO: (".ogx", ".aac", ".mp3", ".mpeg", ".mp4", ".3gp"),
    MediaKind.DOCUMENT: (".pdf",),
}

MEDIA_MIME_TYPES: dict[MediaKind, tuple[str, ...]] = {
    MediaKind.IMAGE: ("image/jpeg", "image/gif", "image/png"),
    MediaKind.VIDEO: ("video/h263", "video/mp4", "video/mpeg", "video/webm"),
    MediaKind.AUDIO: ("audio/ogg", "audio/aac", "audio/mpeg", "audio/mp4", "audio/3gpp"),
    MediaKind.DOCUMENT: ("application/pdf",),
}

ALL_MEDIA_KINDS = frozenset(MediaKind)
VISUAL_MEDIA_KINDS = frozenset({MediaKind.IMAGE, MediaKind.VIDEO})


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and make sure it starts with a dot."""
    ext = extension.strip().lower()
    if not ext.startswith("."):
        ext = "." + ext
    return ext


def extension_of(file_name: str) -> str:
    """Extension of a file name: the last dot-separated segment, lower-cased.

    A name without a dot yields the whole name as its extension, so it can
    never match an allow-list entry.
    """
    return "." + file_name.rsplit(".", 1)[-1].strip().lower()


def check_media_file(
    extension: str,
    mime_type: str,
    kind: MediaKind,
    allowed_kinds: Iterable[MediaKind] = ALL_MEDIA_KINDS,
) -> None:
    """
    Check a candidate file against the declared kind.

    The file is accepted only when the kind is allowed by the caller and both
    the extension and the MIME type belong to that kind's tables.

    Raises:
        UnsupportedKindError: kind is outside allowed_kinds
        ExtensionMismatchError: extension is not listed for kind
        MimeMismatchError: MIME type is not listed for kind
    """
    requested = set(allowed_kinds)
    allowed = [k for k in MediaKind if k in requested]
    if kind not in allowed:
        raise UnsupportedKindError(kind, allowed)

    allowed_extensions = MEDIA_EXTENSIONS[kind]
    ext = normalize_extension(extension)
    if ext not in allowed_extensions:
        raise ExtensionMismatchError(kind, ext, allowed_extensions)

    mime = mime_type.strip().lower()
    if mime not in MEDIA_MIME_TYPES[kind]:
        raise MimeMismatchError(kind, mime, allowed_extensions)


@dataclass(frozen=True)
class MediaRef:
    """Immutable reference to an uploaded asset.

    An empty url means nothing has been uploaded yet.
    """
    kind: MediaKind
    url: str = ""
    size_bytes: int | None = None
    file_name: str | None = None
    mime_type: str | None = None

    def __post_init__(self) -> None:
        if self.size_bytes is not None and self.size_bytes < 0:
            raise ValueError("Media size cannot be negative")

    @property
    def is_uploaded(self) -> bool:
        return bool(self.url)

    @property
    def extension(self) -> str | None:
        if not self.file_name:
            return None
        return extension_of(self.file_name)

    def recheck(self, allowed_kinds: Iterable[MediaKind] = ALL_MEDIA_KINDS) -> None:
        """Re-run the file check with whatever file metadata this ref carries."""
        allowed = set(allowed_kinds)
        if self.kind not in allowed:
            raise UnsupportedKindError(self.kind, [k for k in MediaKind if k in allowed])
        if self.file_name and self.mime_type:
            check_media_file(self.extension, self.mime_type, self.kind, allowed)

    @classmethod
    def from_upload(
        cls,
        file_name: str,
        mime_type: str,
        kind: MediaKind,
        url: str,
        size_bytes: int | None = None,
        allowed_kinds: Iterable[MediaKind] = ALL_MEDIA_KINDS,
        max_size_bytes: int = MAX_UPLOAD_BYTES,
    ) -> "MediaRef":
        """Factory for a freshly uploaded file; rejects it before a ref exists."""
        check_media_file(extension_of(file_name), mime_type, kind, allowed_kinds)
        if size_bytes is not None and size_bytes > max_size_bytes:
            raise MediaTooLargeError(size_bytes, max_size_bytes)
        return cls(
            kind=kind,
            url=url,
            size_bytes=size_bytes,
            file_name=file_name,
            mime_type=mime_type.strip().lower(),
        )
