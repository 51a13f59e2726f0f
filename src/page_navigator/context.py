"""Presentation adapter: project a PageResult into a template context.

The paginator itself knows nothing about templates. Renderers consume the
flat mapping built here and branch on each page marker's `type`.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from page_navigator.models import PageResult
from page_navigator.pagination import page_markers

METADATA_KEYS = (
    "editId",
    "currentPage",
    "totalPages",
    "totalItems",
    "pageSize",
    "hasPrevious",
    "hasNext",
    "previousPage",
    "nextPage",
    "pageNumbers",
)


class RenderContextAdapter(Protocol):
    """Protocol for turning a page into a renderer-specific mapping."""

    def __call__(self, result: PageResult[Any], items_key: str = "items") -> Mapping[str, Any]:
        """Project a page into a mapping.

        Args:
            result: Page to project
            items_key: Key under which the page items are exposed

        Returns:
            Mapping consumed by a template renderer
        """
        ...


def to_render_context(result: PageResult[Any], items_key: str = "items") -> dict[str, Any]:
    """Build the key/value context a template renderer consumes.

    Unlike a plain key/value projection, an items key that names a metadata
    entry is refused instead of being silently overwritten by that entry.

    Args:
        result: Page produced by `paginate`
        items_key: Key for the page items (default "items")

    Returns:
        Mapping with the items, navigation flags and serialized page markers

    Raises:
        ValueError: If items_key is empty or collides with a metadata key

    Example:
        >>> from page_navigator import paginate
        >>> ctx = to_render_context(paginate(["a", "b"], 1, 10), items_key="tasks")
        >>> ctx["tasks"], ctx["pageNumbers"]
        (['a', 'b'], [{'type': 'number', 'value': 1}])
    """
    if not items_key:
        raise ValueError("items_key cannot be empty")
    if items_key in METADATA_KEYS:
        raise ValueError(f"items_key {items_key!r} collides with a pagination metadata key")

    return {
        items_key: list(result.items),
        "editId": result.edit_id,
        "currentPage": result.current_page,
        "totalPages": result.total_pages,
        "totalItems": result.total_items,
        "pageSize": result.page_size,
        "hasPrevious": result.has_previous,
        "hasNext": result.has_next,
        "previousPage": result.previous_page,
        "nextPage": result.next_page,
        "pageNumbers": [marker.model_dump() for marker in page_markers(result)],
    }
