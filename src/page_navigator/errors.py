"""Exception hierarchy for page_navigator.

Page requests are normalized, never rejected, so the only failure the
package defines is a broken page-size precondition.
"""


class PaginationError(Exception):
    """Base exception for all page_navigator errors."""


class InvalidPageSizeError(PaginationError, ValueError):
    """Raised when a page size is not a positive integer or exceeds a configured limit.

    Attributes:
        page_size: The rejected page size value
        max_page_size: The limit that was exceeded, if any
    """

    def __init__(self, page_size: object, max_page_size: int | None = None) -> None:
        self.page_size = page_size
        self.max_page_size = max_page_size
        if max_page_size is None:
            message = f"page_size must be a positive integer, got {page_size!r}"
        else:
            message = f"page_size must not exceed max_page_size ({max_page_size}), got {page_size!r}"
        super().__init__(message)
