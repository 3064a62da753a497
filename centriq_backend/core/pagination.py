"""
Pagination utilities for the dashboard API.
Provides consistent in-memory pagination across all table views.
"""
from typing import TypeVar, Sequence, List, Optional

T = TypeVar("T")


def total_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); 0 for an empty collection."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return (total + page_size - 1) // page_size


def clamp_page(page: int, pages: int) -> int:
    """
    Correct an out-of-range page.

    An empty collection still shows page 1 (with zero rows); a page past
    the end falls back to the last page.
    """
    return min(max(page, 1), max(pages, 1))


def item_range(page: int, page_size: int, total: int) -> tuple:
    """
    1-based (start_item, end_item) shown as "Showing 11-20 of 42".
    Both are None when there is nothing to show.
    """
    if total <= 0:
        return None, None
    start_item = (page - 1) * page_size + 1
    end_item = min(page * page_size, total)
    return start_item, end_item


def create_paginated_response(
    items: List[T],
    total: int,
    page: int,
    page_size: int
) -> dict:
    """
    Create a paginated response dictionary.

    Args:
        items: List of items for current page
        total: Total count of all items
        page: Current page number
        page_size: Items per page

    Returns:
        Dictionary with pagination metadata
    """
    pages = total_pages(total, page_size)
    start_item, end_item = item_range(page, page_size, total)

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "pages": pages,
        "has_next": page < pages,
        "has_prev": page > 1,
        "start_item": start_item,
        "end_item": end_item,
    }


def paginate(items: Sequence[T], page: int = 1, page_size: int = 10) -> dict:
    """
    Slice an already filtered collection into one page.

    The page is clamped first, so a page that went out of range after the
    data shrank lands on the last valid page.
    """
    total = len(items)
    page = clamp_page(page, total_pages(total, page_size))
    offset = (page - 1) * page_size
    return create_paginated_response(list(items[offset:offset + page_size]), total, page, page_size)


def page_count_label(pages: int, page: Optional[int] = None) -> str:
    """Short label for logs, e.g. 'page 2/5'."""
    if page is None:
        return f"{pages} pages"
    return f"page {page}/{max(pages, 1)}"
