"""Upload 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.pagination import PageMeta


class UploadedImageOut(BaseModel):
    image_id: int
    kind: str
    filename: str
    url: str
    size: int
    width: int
    height: int
    created_at: datetime

    model_config = {"from_attributes": True}


class GalleryUploadOut(BaseModel):
    urls: list[str]
    uploaded: int


class UploadedImagePage(BaseModel):
    items: list[UploadedImageOut]
    meta: PageMeta
