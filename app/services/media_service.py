from app.errors import ValidationError
from app.schemas.upload import UploadRequest, UploadResult
from app.services.cloudinary_service import CloudinaryService
from app.services.media_classifier import MediaCategory, build_upload_options, classify
import structlog

logger = structlog.get_logger()


class MediaUploadService:
    def __init__(self, storage: CloudinaryService, folder_prefix: str = "chat_app"):
        self.storage = storage
        self.folder_prefix = folder_prefix

    async def upload(self, request: UploadRequest) -> UploadResult:
        """
        Classify a file, upload it and normalize the provider result.

        Args:
            request: Buffered file with its declared filename and MIME type

        Returns:
            Normalized upload metadata including the legacy URL alias

        Raises:
            ValidationError: If the file is empty
            ProviderError: If the storage provider fails
        """
        if not request.content:
            raise ValidationError("Uploaded file is empty")

        category = classify(request.contentType)
        options = build_upload_options(category, self.folder_prefix)

        logger.info(
            "Processing media upload",
            filename=request.filename,
            content_type=request.contentType,
            size=request.size,
            category=category.value,
            folder=options.folder
        )

        result = await self.storage.upload(request.content, options)
        return normalize_result(result, category)


def normalize_result(result: dict, category: MediaCategory) -> UploadResult:
    """Merge provider fields with the generic and category-specific URL aliases."""
    secure_url = result["secure_url"]
    data = {
        "url": secure_url,
        "mediaUrl": secure_url,
        "publicId": result["public_id"],
        "format": result.get("format"),
        "resourceType": result["resource_type"],
        "bytes": result.get("bytes", 0),
        "duration": result.get("duration"),
        "width": result.get("width"),
        "height": result.get("height"),
    }

    alias = category.legacy_alias
    if alias:
        data[alias] = secure_url

    return UploadResult(**data)
