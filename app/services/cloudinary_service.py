import io
import cloudinary.exceptions
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool
from app.config import Settings
from app.errors import ProviderError
from app.schemas.upload import UploadOptions
import structlog

logger = structlog.get_logger()


class CloudinaryService:
    def __init__(self, cloud_name: str, api_key: str, api_secret: str):
        # Credentials travel with each call instead of the SDK's global config
        self.credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryService":
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret
        )

    async def upload(self, content: bytes, options: UploadOptions) -> dict:
        """
        Stream an in-memory buffer to Cloudinary.

        Args:
            content: Raw bytes of the file
            options: Folder, resource type and transformation hints

        Returns:
            The upload result returned by Cloudinary

        Raises:
            ProviderError: If Cloudinary rejects the upload
        """
        stream = io.BytesIO(content)
        try:
            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                stream,
                **options.to_provider_kwargs(),
                **self.credentials
            )
        except cloudinary.exceptions.Error as e:
            logger.error(
                "Cloudinary upload error",
                error=str(e),
                folder=options.folder,
                resource_type=options.resource_type
            )
            raise ProviderError("cloudinary", str(e))
        finally:
            stream.close()

        logger.info(
            "Upload successful",
            secure_url=result.get("secure_url"),
            public_id=result.get("public_id")
        )
        return result
