import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from app.config import Settings, settings as default_settings
from app.routers import notifications, upload
from app.services.cloudinary_service import CloudinaryService
from app.services.media_service import MediaUploadService
from app.services.notification_service import NotificationService
import structlog


def configure_logging(level: str = "INFO"):
    """Configure structured JSON logging on top of the stdlib logger."""
    logging.basicConfig(format="%(message)s", level=level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()


def create_app(
    settings: Optional[Settings] = None,
    notification_service: Optional[NotificationService] = None,
    media_service: Optional[MediaUploadService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Provider services passed in are used as-is; missing ones are created
    from settings when the application starts.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.notification_service = (
            notification_service or NotificationService.from_settings(settings)
        )
        app.state.media_service = media_service or MediaUploadService(
            CloudinaryService.from_settings(settings),
            folder_prefix=settings.media_folder_prefix
        )
        logger.info("Server started", port=settings.port, environment=settings.environment)
        yield

    app = FastAPI(
        title="Notification Relay API",
        description="Relays push notifications to FCM and media uploads to Cloudinary",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            loc = tuple(first.get("loc", ()))
            if loc and loc[0] in ("body", "query"):
                loc = loc[1:]
            field = ".".join(str(part) for part in loc)
            message = f"{field}: {first.get('msg')}" if field else first.get("msg")
        else:
            message = "Invalid request"
        logger.warning("Rejected malformed request", path=request.url.path, error=message)

        # A "file" form part that is not a file counts as no file
        if request.url.path.startswith(upload.router.prefix):
            return JSONResponse(status_code=400, content={"error": "No file uploaded"})
        return JSONResponse(status_code=400, content={"success": False, "error": message})

    app.include_router(notifications.router)
    app.include_router(upload.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness check endpoint."""
        return "Notification Server Running"

    @app.get("/health")
    async def health_check():
        """Detailed health check endpoint."""
        return {
            "status": "healthy",
            "service": "notification-relay",
            "version": "1.0.0"
        }

    return app


configure_logging(default_settings.log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
