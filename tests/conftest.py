import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch, MagicMock
from app.config import Settings
from app.main import create_app
from app.services.cloudinary_service import CloudinaryService
from app.services.media_service import MediaUploadService
from app.services.notification_service import NotificationService


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        cloudinary_cloud_name="demo",
        cloudinary_api_key="test_key",
        cloudinary_api_secret="test_secret",
        media_folder_prefix="chat_app"
    )


@pytest.fixture
def mock_upload():
    with patch("app.services.cloudinary_service.cloudinary.uploader.upload") as mock:
        yield mock


@pytest.fixture
def mock_send():
    with patch("app.services.notification_service.messaging.send") as mock:
        yield mock


@pytest.fixture(scope="function")
def client(test_settings):
    app = create_app(
        settings=test_settings,
        notification_service=NotificationService(MagicMock()),
        media_service=MediaUploadService(
            CloudinaryService.from_settings(test_settings),
            folder_prefix=test_settings.media_folder_prefix
        )
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_notification_data():
    return {
        "title": "New message",
        "body": "You have a new message from Alice",
        "fcmToken": "dGVzdC1mY20tdG9rZW4"
    }


@pytest.fixture
def sample_image_result():
    return {
        "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/chat_app_images/abc123.jpg",
        "public_id": "chat_app_images/abc123",
        "format": "jpg",
        "resource_type": "image",
        "bytes": 20480,
        "width": 800,
        "height": 600
    }
