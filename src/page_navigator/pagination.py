"""Page slicing and navigation marker computation.

Both functions are pure: the input sequence is only read, and every call
returns freshly built, frozen values. Out-of-range page requests are clamped
into `[1, total_pages]` instead of being rejected.
"""

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from page_navigator.errors import InvalidPageSizeError
from page_navigator.models import ELLIPSIS, PageEllipsis, PageNumber, PageResult

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_EDIT_ID = "None"


def _require_page_size(page_size: int) -> None:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise InvalidPageSizeError(page_size)


def paginate(
    items: Sequence[T],
    requested_page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    edit_id: str = DEFAULT_EDIT_ID,
) -> PageResult[T]:
    """Slice an ordered sequence into the requested page.

    Args:
        items: Full ordered item sequence (already filtered and sorted)
        requested_page: 1-indexed page number; any value is accepted
        page_size: Items per page (must be positive)
        edit_id: Opaque tag passed through to the result

    Returns:
        PageResult holding a copy of the page slice plus metadata

    Raises:
        InvalidPageSizeError: If page_size is not a positive integer

    Example:
        >>> page = paginate(list(range(50)), requested_page=1, page_size=10)
        >>> page.items
        (0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
        >>> page.total_pages
        5
    """
    _require_page_size(page_size)

    total_items = len(items)
    total_pages = 1 if total_items == 0 else -(-total_items // page_size)

    valid_page = min(max(requested_page, 1), total_pages)
    if valid_page != requested_page:
        logger.debug(
            f"Clamped requested page {requested_page} to {valid_page} "
            f"(total_pages={total_pages})"
        )

    start_index = (valid_page - 1) * page_size
    end_index = min(start_index + page_size, total_items)
    page_items = tuple(items[start_index:end_index]) if start_index < total_items else ()

    return PageResult(
        items=page_items,
        current_page=valid_page,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
        edit_id=edit_id,
    )


def page_markers(result: PageResult[T]) -> list[PageNumber | PageEllipsis]:
    """Build the compressed page-number list for navigation controls.

    Shows the first page, a window of one page either side of the current
    page, and the last page. An ellipsis follows page 1 once the current page
    is past 3, and precedes the last page while the current page is more than
    two pages away from it. Entries are deduplicated structurally, so only the first
    ellipsis survives when both gaps are present.

    Args:
        result: Page produced by `paginate`

    Returns:
        Ordered markers with no repeated entries

    Example:
        On page 2 of 10: [1, 2, 3, ..., 10]
        On page 5 of 10: [1, ..., 4, 5, 6, 10]
    """
    current = result.current_page
    total = result.total_pages

    markers: list[PageNumber | PageEllipsis] = [PageNumber(value=1)]

    if current > 3:
        markers.append(ELLIPSIS)

    for i in range(max(2, current - 1), min(total - 1, current + 1) + 1):
        markers.append(PageNumber(value=i))

    if current < total - 2:
        markers.append(ELLIPSIS)

    if total > 1:
        markers.append(PageNumber(value=total))

    # Markers hash by value: repeated numbers and the second ellipsis collapse
    return list(dict.fromkeys(markers))
