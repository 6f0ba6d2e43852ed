"""Uploaded Image 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class UploadedImage(Base):
    __tablename__ = "uploaded_image"

    image_id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(String(20), nullable=False)
    # product/category/customer/banner/variant/gallery/general
    filename = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
    size = Column(Integer, nullable=False)
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)
    uploaded_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    uploader = relationship("User", back_populates="uploaded_images")

    __table_args__ = (
        Index("idx_uploaded_image_kind", "kind", "created_at"),
    )
