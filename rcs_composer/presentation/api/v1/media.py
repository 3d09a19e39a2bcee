from fastapi import APIRouter, Depends

from ....application.dtos import MediaPayload, MediaUploadDTO
from ....application.services import MediaUploadService
from ....domain.exceptions import MediaError
from ..dependencies import get_media_upload_service
from ..errors import unprocessable

router = APIRouter(prefix="/media", tags=["media"])


@router.post(
    "/check",
    response_model=MediaPayload,
    response_model_exclude_none=True,
    summary="Check an uploaded file",
    description="Accept an uploaded file as message media if its extension and MIME type match the declared kind.",
)
async def check_media(
    dto: MediaUploadDTO,
    service: MediaUploadService = Depends(get_media_upload_service),
) -> MediaPayload:
    try:
        media = service.execute(dto)
    except MediaError as e:
        raise unprocessable(e) from e
    return MediaPayload.from_domain(media)
