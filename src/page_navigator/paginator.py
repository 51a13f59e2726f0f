"""Configured facade over `paginate` and `to_render_context`.

Web handlers usually hold one `Paginator` built from configuration and call
it per request with the raw `?page=` value parsed by `parse_page_param`.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger

from page_navigator.config import PaginationConfig, load_config
from page_navigator.context import RenderContextAdapter, to_render_context
from page_navigator.errors import InvalidPageSizeError
from page_navigator.models import PageResult
from page_navigator.pagination import paginate

T = TypeVar("T")


def parse_page_param(raw: object, default: int = 1) -> int:
    """Turn a raw query-string page value into a requested page number.

    Unparsable values fall back to `default`; range clamping is left to
    `paginate`.

    Args:
        raw: Value taken from the request (str, int or None)
        default: Page to request when raw cannot be read as an integer

    Returns:
        Requested page number (may still be out of range)
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


class Paginator:
    """Paginates item sequences with configured defaults."""

    def __init__(
        self,
        config: PaginationConfig | None = None,
        adapter: RenderContextAdapter = to_render_context,
    ) -> None:
        """Initialize paginator.

        Args:
            config: Pagination defaults (built-in defaults when omitted)
            adapter: Projection used by `render_context`
        """
        self.config = config or PaginationConfig()
        self.adapter = adapter

    @classmethod
    def from_config(
        cls,
        config_name: str = "default",
        config_path: str | Path | None = None,
        overrides: list[str] | None = None,
    ) -> "Paginator":
        """Build a paginator from a Hydra YAML config."""
        return cls(load_config(config_name, config_path=config_path, overrides=overrides))

    def _resolve_page_size(self, page_size: int | None) -> int:
        if page_size is None:
            return self.config.default_page_size
        if isinstance(page_size, int) and page_size > self.config.max_page_size:
            logger.debug(
                f"Rejecting page_size {page_size} above max_page_size {self.config.max_page_size}"
            )
            raise InvalidPageSizeError(page_size, max_page_size=self.config.max_page_size)
        return page_size

    def paginate(
        self,
        items: Sequence[T],
        requested_page: int = 1,
        page_size: int | None = None,
        edit_id: str | None = None,
    ) -> PageResult[T]:
        """Paginate items, filling unset arguments from the config.

        Raises:
            InvalidPageSizeError: If an explicit page_size is not positive or
                exceeds config.max_page_size
        """
        return paginate(
            items,
            requested_page=requested_page,
            page_size=self._resolve_page_size(page_size),
            edit_id=self.config.default_edit_id if edit_id is None else edit_id,
        )

    def render_context(
        self,
        items: Sequence[Any],
        requested_page: int = 1,
        page_size: int | None = None,
        edit_id: str | None = None,
        items_key: str | None = None,
    ) -> Mapping[str, Any]:
        """Paginate items and project the page through the adapter."""
        result = self.paginate(
            items, requested_page=requested_page, page_size=page_size, edit_id=edit_id
        )
        return self.adapter(result, items_key or self.config.items_key)
