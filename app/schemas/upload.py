from pydantic import BaseModel
from typing import Optional


class UploadRequest(BaseModel):
    content: bytes
    filename: str
    contentType: str
    size: int


class UploadOptions(BaseModel):
    folder: str
    resource_type: str
    quality: Optional[str] = None
    fetch_format: Optional[str] = None
    format: Optional[str] = None

    class Config:
        frozen = True

    def to_provider_kwargs(self) -> dict:
        """Options as keyword arguments for the storage SDK, hints left unset are dropped."""
        return self.model_dump(exclude_none=True)


class UploadResult(BaseModel):
    url: str
    mediaUrl: str
    publicId: str
    format: Optional[str] = None
    resourceType: str
    bytes: int
    duration: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None

    # Legacy aliases kept for older clients
    imageUrl: Optional[str] = None
    videoUrl: Optional[str] = None
    audioUrl: Optional[str] = None


class UploadErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
