"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import User
from app.models.uploaded_image import UploadedImage

__all__ = [
    "User",
    "UploadedImage",
]
