"""Upload Service 도메인 서비스 레이어입니다. 이미지 검증, 저장, 업로드 기록 조회 흐름을 캡슐화합니다."""

import logging
import os
from contextlib import contextmanager
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.models.uploaded_image import UploadedImage
from app.models.user import User
from app.schemas.image import ValidationResult
from app.services import image_validation
from app.services.image_validation import DecodeError
from app.utils.helpers import save_bytes
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

GENERAL_KIND = "general"
VARIANT_KIND = "variant"
GALLERY_KIND = "gallery"


def _resolve_profile(kind: str):
    try:
        return image_validation.get_profile(kind)
    except KeyError:
        allowed = ", ".join(sorted(image_validation.PROFILES))
        raise HTTPException(status_code=400, detail=f"유효하지 않은 이미지 type 입니다. 허용: {allowed}")


def check_image(content: bytes, kind: Optional[str]) -> ValidationResult:
    if kind is None:
        try:
            dims = image_validation.get_dimensions(content)
        except DecodeError as exc:
            logger.warning("Image decode failed for untyped upload: %s", exc)
            return ValidationResult(valid=False, error=image_validation.DECODE_FAILED_MESSAGE)
        return ValidationResult(valid=True, dimensions=dims)
    return image_validation.validate(content, _resolve_profile(kind))


@contextmanager
def _saving(db: Session):
    """Commit on success; on any failure roll back and remove files written so far."""
    written: list[str] = []
    try:
        yield written
        db.commit()
    except Exception:
        db.rollback()
        _discard(written)
        raise


def _discard(paths: list[str]) -> None:
    for path in paths:
        try:
            os.remove(path)
        except OSError as exc:
            logger.warning("Could not remove orphan upload %s: %s", path, exc)


def _record(
    db: Session,
    written: list[str],
    content: bytes,
    filename: str,
    kind: str,
    width: int,
    height: int,
    uploader: User,
) -> UploadedImage:
    saved = save_bytes(content, filename, subfolder=f"images/{kind}")
    written.append(saved["path"])
    image = UploadedImage(
        kind=kind,
        filename=saved["filename"],
        url=saved["url"],
        size=saved["size"],
        width=width,
        height=height,
        uploaded_by=uploader.user_id,
    )
    db.add(image)
    return image


def store_image(db: Session, content: bytes, filename: str, kind: Optional[str], uploader: User) -> UploadedImage:
    result = check_image(content, kind)
    if not result.valid:
        logger.warning("Rejected %s upload %r: %s", kind or GENERAL_KIND, filename, result.error)
        raise HTTPException(status_code=400, detail=result.error)

    dims = result.dimensions
    with _saving(db) as written:
        image = _record(db, written, content, filename, kind or GENERAL_KIND, dims.width, dims.height, uploader)
    db.refresh(image)
    logger.info("Stored %s image %s (%dx%d)", image.kind, image.url, image.width, image.height)
    return image


def _lenient_size(content: bytes) -> tuple[int, int]:
    # 읽을 수 없는 이미지도 정사각형 검사는 통과하므로 기록용 크기는 0이 될 수 있다.
    try:
        dims = image_validation.get_dimensions(content)
    except DecodeError:
        return 0, 0
    return dims.width, dims.height


def store_variant_image(db: Session, content: bytes, filename: str, uploader: User) -> UploadedImage:
    if not image_validation.is_roughly_square(content):
        raise HTTPException(status_code=400, detail="Variant image must be square (1:1 aspect ratio).")

    with _saving(db) as written:
        image = _record(db, written, content, filename, VARIANT_KIND, *_lenient_size(content), uploader)
    db.refresh(image)
    logger.info("Stored variant image %s", image.url)
    return image


def store_gallery_images(
    db: Session,
    files: list[tuple[str, bytes]],
    existing_count: int,
    uploader: User,
) -> list[UploadedImage]:
    if existing_count < 0:
        raise HTTPException(status_code=400, detail="existing_count는 0 이상이어야 합니다.")
    limit = settings.MAX_PRODUCT_IMAGES
    if existing_count + len(files) > limit:
        raise HTTPException(status_code=400, detail=f"You can only upload up to {limit} images per product")

    # 하나라도 실패하면 아무 것도 저장하지 않는다.
    for filename, content in files:
        if not image_validation.is_roughly_square(content):
            raise HTTPException(
                status_code=400,
                detail=f"Image {filename} is not square (1:1). Please upload 1:1 images.",
            )

    with _saving(db) as written:
        images = [
            _record(db, written, content, filename, GALLERY_KIND, *_lenient_size(content), uploader)
            for filename, content in files
        ]
    for image in images:
        db.refresh(image)
    logger.info("Stored %d gallery image(s)", len(images))
    return images


def list_images(db: Session, page: int, limit: int, kind: Optional[str] = None):
    query = db.query(UploadedImage)
    if kind:
        query = query.filter(UploadedImage.kind == kind)
    query = query.order_by(UploadedImage.created_at.desc(), UploadedImage.image_id.desc())
    items, meta = paginate(query, page, limit, radius=settings.PAGINATION_RADIUS)
    return {"items": items, "meta": meta}
