# micafe/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    FRONTEND_URL: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Notifications shown by the frontend disappear after this many seconds
    NOTIFICATION_DISPLAY_SECONDS: int = 3

    # First receipt number handed out in a fresh process
    RECEIPT_START: int = 1
    RECEIPT_DIGITS: int = 6

    DEFAULT_IMAGE_URL: str = "https://placehold.co/600x400/CCCCCC/FFF?text=Nuevo"
    ORDER_HISTORY_LIMIT: int = 10
    DASHBOARD_RECENT_ORDERS: int = 20
    SEED_MOCK_DATA: bool = True

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
