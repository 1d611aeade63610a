from fastapi import Request
from app.services.media_service import MediaUploadService
from app.services.notification_service import NotificationService


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


def get_media_service(request: Request) -> MediaUploadService:
    return request.app.state.media_service
