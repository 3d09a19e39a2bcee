from .action import ACTION_VALUE_LABELS, ACTION_VALUE_RULES, ActionType, SuggestedAction
from .media import (
    ALL_MEDIA_KINDS,
    MAX_UPLOAD_BYTES,
    MEDIA_EXTENSIONS,
    MEDIA_MIME_TYPES,
    VISUAL_MEDIA_KINDS,
    MediaKind,
    MediaRef,
    check_media_file,
    extension_of,
)
from .suggestions import (
    MAX_SUGGESTIONS,
    EmptySuggestions,
    SuggestedActions,
    SuggestedReplies,
    SuggestionKind,
    SuggestionSet,
)

__all__ = [
    "ACTION_VALUE_LABELS",
    "ACTION_VALUE_RULES",
    "ALL_MEDIA_KINDS",
    "ActionType",
    "EmptySuggestions",
    "MAX_SUGGESTIONS",
    "MAX_UPLOAD_BYTES",
    "MEDIA_EXTENSIONS",
    "MEDIA_MIME_TYPES",
    "MediaKind",
    "MediaRef",
    "SuggestedAction",
    "SuggestedActions",
    "SuggestedReplies",
    "SuggestionKind",
    "SuggestionSet",
    "VISUAL_MEDIA_KINDS",
    "check_media_file",
    "extension_of",
]
