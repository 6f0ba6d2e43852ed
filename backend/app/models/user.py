"""User 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(100), unique=True, nullable=False)
    name = Column(String(50), nullable=False)
    role = Column(String(20), nullable=False)  # admin/customer/driver
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())

    uploaded_images = relationship("UploadedImage", back_populates="uploader")
