from ...application.services import MediaUploadService, ValidateMessageService
from ...config import settings


def get_validate_service() -> ValidateMessageService:
    return ValidateMessageService()


def get_media_upload_service() -> MediaUploadService:
    return MediaUploadService(max_upload_bytes=settings.max_upload_bytes)
