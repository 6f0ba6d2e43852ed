"""Image Validation 도메인 서비스 레이어입니다. 업로드 용도별 이미지 크기 규칙을 검증합니다.

검증은 업로드 파일을 저장하기 전에 수행됩니다.

- ``validate``: 디코딩 실패 시 유효하지 않은 결과를 반환합니다 (fail-closed).
- ``is_roughly_square``: 옵션/갤러리 이미지용 5% 허용 오차 검사이며,
  디코딩 실패 시 유효한 것으로 취급합니다 (fail-open).
"""

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Union

from PIL import Image, UnidentifiedImageError

from app.schemas.image import ImageDimensions, ValidationResult

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, BinaryIO]

DECODE_FAILED_MESSAGE = "Failed to validate image"

SQUARE_RATIO_MIN = 0.95
SQUARE_RATIO_MAX = 1.05


class DecodeError(Exception):
    """Payload could not be interpreted as an image."""


@dataclass(frozen=True)
class ExactSize:
    width: int
    height: int
    label: str

    def check(self, dims: ImageDimensions) -> str | None:
        if dims.width != self.width or dims.height != self.height:
            return (
                f"{self.label} must be exactly {self.width}x{self.height}px "
                f"(got {dims.width}x{dims.height}px)"
            )
        return None


@dataclass(frozen=True)
class SquareWithMinimum:
    min_side: int
    label: str

    def check(self, dims: ImageDimensions) -> str | None:
        # 비율 검사를 크기 검사보다 먼저 수행한다.
        if dims.width != dims.height:
            return f"{self.label} must be square (1:1 aspect ratio)"
        if dims.width < self.min_side or dims.height < self.min_side:
            return f"{self.label} must be at least {self.min_side}x{self.min_side}px"
        return None


ValidationProfile = Union[ExactSize, SquareWithMinimum]

PROFILES: dict[str, ValidationProfile] = {
    "category": ExactSize(300, 300, "Category image"),
    "customer": ExactSize(400, 400, "Customer profile image"),
    "banner": ExactSize(1000, 500, "Banner image"),
    "product": SquareWithMinimum(800, "Product image"),
}


def get_profile(name: str) -> ValidationProfile:
    return PROFILES[name]


def _read_bytes(file: ImageSource) -> bytes:
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    return file.read()


def get_dimensions(file: ImageSource) -> ImageDimensions:
    """Decode ``file`` and return its pixel size.

    Raises ``DecodeError`` for empty, unidentified, corrupt or oversized
    payloads. The decode handle is closed on every path.
    """
    data = _read_bytes(file)
    if not data:
        raise DecodeError("Empty image payload")

    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(str(exc)) from exc
    except (OSError, SyntaxError, ValueError) as exc:
        raise DecodeError(f"Corrupt image data: {exc}") from exc

    if width <= 0 or height <= 0:
        raise DecodeError(f"Invalid image size {width}x{height}")
    return ImageDimensions(width=width, height=height)


def validate(file: ImageSource, profile: ValidationProfile) -> ValidationResult:
    try:
        dims = get_dimensions(file)
    except DecodeError as exc:
        logger.warning("Image decode failed during %s validation: %s", profile.label, exc)
        return ValidationResult(valid=False, error=DECODE_FAILED_MESSAGE)

    error = profile.check(dims)
    if error:
        return ValidationResult(valid=False, error=error, dimensions=dims)
    return ValidationResult(valid=True, dimensions=dims)


def is_roughly_square(file: ImageSource) -> bool:
    try:
        dims = get_dimensions(file)
    except DecodeError as exc:
        # 읽을 수 없는 이미지는 통과시킨다.
        logger.warning("Image decode failed during square check, accepting: %s", exc)
        return True

    ratio = dims.width / dims.height
    return SQUARE_RATIO_MIN <= ratio <= SQUARE_RATIO_MAX
