from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.dependencies import get_notification_service
from app.errors import ProviderError
from app.schemas.notification import NotificationRequest, NotificationResponse
from app.services.notification_service import NotificationService
import structlog

logger = structlog.get_logger()
router = APIRouter(prefix="/send-notification", tags=["notifications"])


@router.post("", response_model=NotificationResponse, response_model_exclude_none=True)
async def send_notification(
    request: NotificationRequest,
    notification_service: NotificationService = Depends(get_notification_service)
):
    """
    Forward a push notification to a single device through FCM.

    Args:
        request: Contains title, body and the device FCM token

    Returns:
        The FCM message id, or the provider error with status 500
    """
    try:
        message_id = await notification_service.send(request)
        return NotificationResponse(success=True, response=message_id)

    except ProviderError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "error": e.message}
        )
    except Exception as e:
        logger.error("Failed to send notification", error=str(e))
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e)}
        )
