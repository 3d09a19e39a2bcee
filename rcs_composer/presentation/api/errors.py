from fastapi import HTTPException

from ...domain.exceptions import ComposerError


def unprocessable(error: ComposerError) -> HTTPException:
    """422 carrying the error code so clients can react to specific rejections."""
    return HTTPException(
        status_code=422,
        detail={"code": error.code, "message": error.message, "details": error.details},
    )
