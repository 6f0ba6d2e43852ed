"""Uploads 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.models.user import User
from app.schemas.image import ValidationResult
from app.schemas.upload import GalleryUploadOut, UploadedImageOut, UploadedImagePage
from app.services import upload_service
from app.utils.helpers import read_upload

router = APIRouter(prefix="/api/admin", tags=["uploads"])


@router.post("/upload-image", response_model=UploadedImageOut)
async def upload_image(
    image: UploadFile = File(...),
    type: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    content = await read_upload(image)
    return upload_service.store_image(db, content, image.filename, type, current_user)


@router.post("/validate-image", response_model=ValidationResult)
async def validate_image(
    image: UploadFile = File(...),
    type: Optional[str] = Query(None),
    _current_user: User = Depends(require_admin),
):
    content = await read_upload(image)
    return upload_service.check_image(content, type)


@router.post("/products/gallery", response_model=GalleryUploadOut)
async def upload_gallery(
    images: List[UploadFile] = File(...),
    existing_count: int = Form(0),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    files = [(f.filename, await read_upload(f)) for f in images]
    stored = upload_service.store_gallery_images(db, files, existing_count, current_user)
    return GalleryUploadOut(urls=[i.url for i in stored], uploaded=len(stored))


@router.post("/products/variant-image", response_model=UploadedImageOut)
async def upload_variant_image(
    image: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    content = await read_upload(image)
    return upload_service.store_variant_image(db, content, image.filename, current_user)


@router.get("/uploads", response_model=UploadedImagePage)
def list_uploads(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    type: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    return upload_service.list_images(db, page, limit, kind=type)
