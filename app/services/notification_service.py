import firebase_admin
from firebase_admin import credentials, exceptions, messaging
from fastapi.concurrency import run_in_threadpool
from app.config import Settings
from app.errors import ProviderError
from app.schemas.notification import NotificationRequest
import structlog

logger = structlog.get_logger()

FIREBASE_APP_NAME = "notification-relay"


class NotificationService:
    def __init__(self, firebase_app: firebase_admin.App):
        self.firebase_app = firebase_app

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotificationService":
        """
        Initialize a named Firebase app from the service account file.

        The app is looked up first so that building the service twice in the
        same process does not fail on duplicate initialization.
        """
        try:
            firebase_app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            cred = credentials.Certificate(settings.firebase_service_account_path)
            firebase_app = firebase_admin.initialize_app(cred, name=FIREBASE_APP_NAME)

        logger.info(
            "Firebase app initialized",
            app_name=FIREBASE_APP_NAME,
            service_account=settings.firebase_service_account_path
        )
        return cls(firebase_app)

    async def send(self, request: NotificationRequest) -> str:
        """
        Send a push notification to a single device.

        Args:
            request: Title, body and FCM registration token

        Returns:
            The message id assigned by FCM

        Raises:
            ProviderError: If FCM rejects the message
        """
        message = messaging.Message(
            notification=messaging.Notification(title=request.title, body=request.body),
            token=request.fcmToken
        )

        try:
            message_id = await run_in_threadpool(messaging.send, message, app=self.firebase_app)
        except (exceptions.FirebaseError, ValueError) as e:
            logger.error("Error sending notification", error=str(e))
            raise ProviderError("fcm", str(e))

        logger.info("Notification sent", message_id=message_id)
        return message_id
