"""Pagination 관련 공용 유틸리티 헬퍼입니다."""

import math
from typing import Any, List, Tuple, Union

from sqlalchemy.orm import Query

ELLIPSIS = "..."

PageEntry = Union[int, str]


def page_window(current_page: int, total_pages: int, radius: int = 2) -> List[PageEntry]:
    """Return the page labels a pagination bar renders.

    >>> page_window(5, 10)
    [1, '...', 3, 4, 5, 6, 7, '...', 10]

    ``current_page`` is not clamped to ``total_pages``; navigation bounds are
    the caller's concern.
    """
    if total_pages < 1:
        raise ValueError("total_pages must be >= 1")
    if current_page < 1:
        raise ValueError("current_page must be >= 1")
    if radius < 0:
        raise ValueError("radius must be >= 0")

    inner = list(range(max(2, current_page - radius), min(total_pages - 1, current_page + radius) + 1))

    pages: List[PageEntry] = [1]
    if inner and inner[0] > 2:
        pages.append(ELLIPSIS)
    pages.extend(inner)
    if inner and inner[-1] < total_pages - 1:
        pages.append(ELLIPSIS)
    if total_pages > 1:
        pages.append(total_pages)
    return pages


def count_pages(total_items: int, limit: int) -> int:
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return max(1, math.ceil(total_items / limit))


def build_page_meta(page: int, limit: int, total_items: int, radius: int = 2) -> dict:
    total_pages = count_pages(total_items, limit)
    return {
        "page": page,
        "limit": limit,
        "total": total_items,
        "total_pages": total_pages,
        "has_prev": page > 1,
        "has_next": page < total_pages,
        "pages": page_window(page, total_pages, radius),
    }


def paginate(query: Query, page: int, limit: int, radius: int = 2) -> Tuple[List[Any], dict]:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, build_page_meta(page, limit, total, radius)
