import structlog

from ...domain.exceptions import MediaError
from ...domain.value_objects import MAX_UPLOAD_BYTES, MediaRef
from ...infrastructure.logging import sanitize_for_logging
from ..dtos import MediaUploadDTO
from ..ports.inbound import CheckMediaUseCase

logger = structlog.get_logger()


class MediaUploadService(CheckMediaUseCase):
    """Turns an upload reported by the file picker into a checked media reference."""

    def __init__(self, max_upload_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_upload_bytes = max_upload_bytes

    def execute(self, dto: MediaUploadDTO) -> MediaRef:
        try:
            media = MediaRef.from_upload(
                file_name=dto.file_name,
                mime_type=dto.mime_type,
                kind=dto.kind,
                url=dto.url,
                size_bytes=dto.size_bytes,
                allowed_kinds=dto.allowed_kinds,
                max_size_bytes=self._max_upload_bytes,
            )
        except MediaError as e:
            logger.warning(
                "Media rejected",
                file_name=sanitize_for_logging(dto.file_name),
                mime_type=dto.mime_type,
                kind=dto.kind.value,
                code=e.code,
            )
            raise

        logger.info("Media accepted", kind=media.kind.value, size_bytes=media.size_bytes)
        return media
