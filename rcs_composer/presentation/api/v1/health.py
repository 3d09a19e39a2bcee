from fastapi import APIRouter

from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "healthy", "service": settings.service_name}
