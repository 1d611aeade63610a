"""
Classification of uploaded media by MIME type.

Every per-type decision made for an upload (target folder, Cloudinary
resource type, transformation hints and the legacy URL alias returned to
older clients) is derived from the single MediaCategory computed here.
"""

from enum import Enum
from typing import Optional
from app.schemas.upload import UploadOptions


class ResourceType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"
    AUTO = "auto"  # Cloudinary auto-detection, never selected by classify()


class MediaCategory(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"

    @property
    def folder_tag(self) -> str:
        return _FOLDER_TAGS[self]

    @property
    def resource_type(self) -> ResourceType:
        return _RESOURCE_TYPES[self]

    @property
    def legacy_alias(self) -> Optional[str]:
        """Name of the backward-compatible URL field, or None for documents."""
        return _LEGACY_ALIASES.get(self)


_FOLDER_TAGS = {
    MediaCategory.IMAGE: "images",
    MediaCategory.VIDEO: "videos",
    MediaCategory.AUDIO: "audio",
    MediaCategory.DOCUMENT: "documents",
}

# Cloudinary stores audio under the video resource type
_RESOURCE_TYPES = {
    MediaCategory.IMAGE: ResourceType.IMAGE,
    MediaCategory.VIDEO: ResourceType.VIDEO,
    MediaCategory.AUDIO: ResourceType.VIDEO,
    MediaCategory.DOCUMENT: ResourceType.RAW,
}

_EXTRA_OPTIONS = {
    MediaCategory.IMAGE: {"quality": "auto", "fetch_format": "auto"},
    MediaCategory.VIDEO: {"quality": "auto", "format": "mp4"},
}

_LEGACY_ALIASES = {
    MediaCategory.IMAGE: "imageUrl",
    MediaCategory.VIDEO: "videoUrl",
    MediaCategory.AUDIO: "audioUrl",
}

_PREFIXES = (
    ("image/", MediaCategory.IMAGE),
    ("video/", MediaCategory.VIDEO),
    ("audio/", MediaCategory.AUDIO),
)


def classify(content_type: Optional[str]) -> MediaCategory:
    """
    Map a MIME type to its media category.

    Args:
        content_type: Declared MIME type of the upload, may be empty

    Returns:
        First category whose prefix matches, DOCUMENT otherwise
    """
    mime = (content_type or "").strip().lower()
    for prefix, category in _PREFIXES:
        if mime.startswith(prefix):
            return category
    return MediaCategory.DOCUMENT


def build_upload_options(category: MediaCategory, folder_prefix: str = "chat_app") -> UploadOptions:
    """Build the Cloudinary upload options for a category."""
    return UploadOptions(
        folder=f"{folder_prefix}_{category.folder_tag}",
        resource_type=category.resource_type.value,
        **_EXTRA_OPTIONS.get(category, {})
    )
