import os
import uuid
from fastapi import UploadFile, HTTPException
from app.config import settings


def file_extension(filename: str | None) -> str:
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def validate_image_file(file: UploadFile) -> None:
    ext = file_extension(file.filename)
    if ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}",
        )


async def read_upload(file: UploadFile) -> bytes:
    validate_image_file(file)
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")
    return content


def save_bytes(content: bytes, original_filename: str, subfolder: str = "") -> dict:
    folder = os.path.join(settings.UPLOAD_DIR, subfolder)
    os.makedirs(folder, exist_ok=True)

    ext = file_extension(original_filename)
    filename = f"{uuid.uuid4().hex}.{ext}"
    path = os.path.join(folder, filename)

    with open(path, "wb") as f:
        f.write(content)

    return {
        "filename": original_filename,
        "url": f"/uploads/{subfolder}/{filename}".replace("\\", "/"),
        "size": len(content),
        "path": path,
    }
