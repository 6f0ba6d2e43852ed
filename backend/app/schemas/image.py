"""Image 검증 결과 계약을 위한 Pydantic 스키마입니다."""

from typing import Optional

from pydantic import BaseModel, Field


class ImageDimensions(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None
    dimensions: Optional[ImageDimensions] = None
