from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"

    # Firebase Cloud Messaging
    firebase_service_account_path: str = "./serviceAccount.json"

    # Cloudinary configuration
    cloudinary_cloud_name: str = "placeholder"
    cloudinary_api_key: str = "placeholder"
    cloudinary_api_secret: str = "placeholder"
    media_folder_prefix: str = "chat_app"

    cors_allow_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
