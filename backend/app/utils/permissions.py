"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

ADMIN = "admin"
CUSTOMER = "customer"
DRIVER = "driver"

ALL_ROLES = (ADMIN, CUSTOMER, DRIVER)
