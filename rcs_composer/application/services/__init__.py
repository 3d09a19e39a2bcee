from .compose_message_service import ComposeMessageService
from .media_upload_service import MediaUploadService
from .submit_message_service import SubmitMessageService
from .validate_message_service import ValidateMessageService

__all__ = [
    "ComposeMessageService",
    "MediaUploadService",
    "SubmitMessageService",
    "ValidateMessageService",
]
