from pydantic import BaseModel, Field
from typing import Optional


class NotificationRequest(BaseModel):
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    fcmToken: str = Field(..., min_length=1)


class NotificationResponse(BaseModel):
    success: bool
    response: Optional[str] = None  # FCM message id
    error: Optional[str] = None
