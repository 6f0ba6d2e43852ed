"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    auth_service,
    image_validation,
    upload_service,
)

__all__ = [
    "auth_service",
    "image_validation",
    "upload_service",
]
