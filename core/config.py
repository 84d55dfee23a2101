"""
Application configuration settings
"""
import logging
import os
from typing import List


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = "Kubernetes Dashboard API"
    APP_VERSION: str = "1.0.0"
    SERVICE_NAME: str = "k8s-dashboard"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = False
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE"]
    CORS_HEADERS: List[str] = ["content-type"]

    # Paths
    STATIC_DIR: str = os.path.join(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "static"
    )
    INDEX_PATH: str = "/index.html"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


settings = Settings()


def configure_logging():
    """루트 로거 설정 (이미 설정되어 있으면 변경 없음)"""
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
