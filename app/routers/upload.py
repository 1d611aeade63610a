from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from typing import Optional
from app.dependencies import get_media_service
from app.errors import ProviderError, ValidationError
from app.schemas.upload import UploadErrorResponse, UploadRequest, UploadResult
from app.services.media_service import MediaUploadService
import structlog

logger = structlog.get_logger()
router = APIRouter(prefix="/upload", tags=["upload"])


@router.post(
    "",
    response_model=UploadResult,
    response_model_exclude_none=True,
    responses={400: {"model": UploadErrorResponse}, 500: {"model": UploadErrorResponse}}
)
async def upload_media(
    file: Optional[UploadFile] = File(None),
    media_service: MediaUploadService = Depends(get_media_service)
):
    """
    Upload an image, video, audio file or document to Cloudinary.

    Args:
        file: Multipart file field named "file"

    Returns:
        Normalized upload metadata with the legacy URL alias for the media type
    """
    logger.info("Media upload request received")

    if file is None:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})

    try:
        content = await file.read()
        upload_request = UploadRequest(
            content=content,
            filename=file.filename or "",
            contentType=file.content_type or "",
            size=len(content)
        )
        return await media_service.upload(upload_request)

    except ValidationError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except ProviderError as e:
        logger.error("Media upload failed", error=e.message, filename=file.filename)
        return JSONResponse(
            status_code=e.status_code,
            content={"error": "Upload failed", "details": e.message}
        )
    except Exception as e:
        logger.error("Media upload failed", error=str(e), filename=file.filename)
        return JSONResponse(
            status_code=500,
            content={"error": "Upload failed", "details": str(e)}
        )
    finally:
        await file.close()
