"""Pagination helper for server-rendered list pages.

Slices an already-materialized, ordered item sequence into pages and computes
the metadata a template needs to draw navigation controls.

Architecture:
    - pagination: `paginate` slicing and `page_markers` navigation list
    - models: Pydantic schemas for page results and page markers
    - context: Flat template-context projection of a page
    - paginator: Config-driven facade and query-string parsing
    - config: Hydra/OmegaConf-backed defaults

Usage:
    >>> from page_navigator import paginate, to_render_context
    >>> page = paginate(tasks, requested_page=2, page_size=10)
    >>> context = to_render_context(page, items_key="tasks")
"""

__version__ = "0.1.0"

from page_navigator.context import RenderContextAdapter, to_render_context
from page_navigator.errors import InvalidPageSizeError, PaginationError
from page_navigator.models import ELLIPSIS, PageEllipsis, PageMarker, PageNumber, PageResult
from page_navigator.pagination import page_markers, paginate
from page_navigator.paginator import Paginator, parse_page_param

__all__ = [
    "ELLIPSIS",
    "InvalidPageSizeError",
    "PageEllipsis",
    "PageMarker",
    "PageNumber",
    "PageResult",
    "PaginationError",
    "Paginator",
    "RenderContextAdapter",
    "page_markers",
    "paginate",
    "parse_page_param",
    "to_render_context",
]
