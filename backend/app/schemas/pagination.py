"""페이지네이션 메타 정보 계약을 위한 Pydantic 스키마입니다."""

from typing import List, Union

from pydantic import BaseModel


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_prev: bool
    has_next: bool
    # 페이지 번호 또는 "..." 표시
    pages: List[Union[int, str]]
