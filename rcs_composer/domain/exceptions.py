"""
Composer error types.

Structural errors raised by an explicit edit attempt. A rejected edit never
changes the draft it was applied to.
"""

from typing import Any, Iterable, Optional


class ComposerError(ValueError):
    code = "composer_error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Media


class MediaError(ComposerError):
    code = "media_error"


class UnsupportedKindError(MediaError):
    code = "unsupported_kind"

    def __init__(self, kind: Any, allowed_kinds: Iterable[Any]):
        allowed_kinds = tuple(allowed_kinds)
        allowed = [getattr(k, "value", k) for k in allowed_kinds]
        kind_value = getattr(kind, "value", kind)
        super().__init__(
            f"Media type '{kind_value}' is not allowed here. Allowed: {', '.join(allowed)}",
            {"kind": kind_value, "allowed_kinds": allowed},
        )
        self.kind = kind
        self.allowed_kinds = allowed_kinds


class FileTypeMismatchError(MediaError):
    """Extension or MIME type does not belong to the declared kind."""

    code = "file_type_mismatch"

    def __init__(self, kind: Any, value: str, allowed_extensions: Iterable[str]):
        self.kind = kind
        self.allowed_extensions = tuple(allowed_extensions)
        super().__init__(
            f"Invalid file type. Allowed types: {', '.join(self.allowed_extensions)}",
            {
                "kind": getattr(kind, "value", kind),
                "value": value,
                "allowed_extensions": list(self.allowed_extensions),
            },
        )


class ExtensionMismatchError(FileTypeMismatchError):
    code = "extension_mismatch"


class MimeMismatchError(FileTypeMismatchError):
    code = "mime_mismatch"


class MediaTooLargeError(MediaError):
    code = "media_too_large"

    def __init__(self, size_bytes: int, max_size_bytes: int):
        super().__init__(
            f"File is too large ({size_bytes} bytes). Maximum is {max_size_bytes} bytes",
            {"size_bytes": size_bytes, "max_size_bytes": max_size_bytes},
        )


# Suggestions


class SuggestionError(ComposerError):
    code = "suggestion_error"


class CardinalityExceededError(SuggestionError):
    code = "cardinality_exceeded"

    def __init__(self, limit: int):
        super().__init__(f"A card can hold at most {limit} suggestions", {"limit": limit})
        self.limit = limit


class MixedSuggestionKindsError(SuggestionError):
    code = "mixed_suggestion_kinds"

    def __init__(self, current: str, attempted: str):
        super().__init__(
            f"Card already holds suggested {current}; remove them before adding {attempted}",
            {"current": current, "attempted": attempted},
        )


class IndexOutOfRangeError(SuggestionError):
    code = "index_out_of_range"

    def __init__(self, index: int, length: int):
        super().__init__(
            f"Suggestion index {index} is out of range (0..{length - 1})"
            if length
            else f"Suggestion index {index} is out of range (no suggestions)",
            {"index": index, "length": length},
        )


# Carousel


class CarouselError(ComposerError):
    code = "carousel_error"


class CarouselFullError(CarouselError):
    code = "carousel_full"

    def __init__(self, limit: int):
        super().__init__(f"A carousel can hold at most {limit} cards", {"limit": limit})
        self.limit = limit


class CardIndexOutOfRangeError(CarouselError):
    code = "card_index_out_of_range"

    def __init__(self, index: int, length: int):
        super().__init__(
            f"Card index {index} is out of range for a carousel of {length} cards",
            {"index": index, "length": length},
        )


# Envelope


class VariantMismatchError(ComposerError):
    code = "variant_mismatch"

    def __init__(self, operation: str, message_type: Any):
        type_value = getattr(message_type, "value", message_type)
        super().__init__(
            f"Cannot {operation} on a '{type_value}' message",
            {"operation": operation, "message_type": type_value},
        )


class NotSendableError(ComposerError):
    code = "not_sendable"

    def __init__(self, violations: list):
        super().__init__(
            f"Message has {len(violations)} validation violation(s)",
            {"violations": [v.to_dict() for v in violations]},
        )
        self.violations = violations
