from __future__ import annotations

import math
from dataclasses import dataclass

from record_shop.domain.search import Paging


@dataclass(frozen=True, slots=True)
class PageWindow:
    current_page: int
    previous_page: int
    next_page: int
    page_count: int
    limit: int


def page_offset(page: int, limit: int) -> int:
    """Number of matches to skip before the requested page."""
    return (page - 1) * limit


def paging_for(page: int, limit: int) -> Paging:
    return Paging(offset=page_offset(page, limit), limit=limit)


def calculate_page_window(total_count: int, page: int, limit: int) -> PageWindow:
    """
    Page metadata for a result set of `total_count` matches.

    Never raises for out-of-range pages: previous/next are clamped instead.
    - page_count is at least 1, even when nothing matched
    - previous_page never goes below 1
    - next_page never exceeds page_count
    - page itself is echoed as-is, even when beyond page_count
    """
    page_count = max(math.ceil(total_count / limit), 1)
    previous_page = page if page == 1 else page - 1
    next_page = page_count if page + 1 >= page_count else page + 1

    return PageWindow(
        current_page=page,
        previous_page=previous_page,
        next_page=next_page,
        page_count=page_count,
        limit=limit,
    )
