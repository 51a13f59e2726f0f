"""Pydantic models for page slices and navigation markers.

Every value produced by the paginator is a frozen model: results are created
fresh per call, compare by value, and cannot be changed after return.
"""

from __future__ import annotations

from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class PageNumber(BaseModel):
    """A clickable page number in a navigation control.

    Attributes:
        type: Discriminator tag, always "number"
        value: 1-indexed page number
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["number"] = "number"
    value: int = Field(ge=1)


class PageEllipsis(BaseModel):
    """A non-clickable gap marker between two visible page numbers."""

    model_config = ConfigDict(frozen=True)

    type: Literal["ellipsis"] = "ellipsis"


ELLIPSIS = PageEllipsis()

PageMarker = Annotated[Union[PageNumber, PageEllipsis], Field(discriminator="type")]


class PageResult(BaseModel, Generic[T]):
    """One page of an ordered item sequence plus navigation metadata.

    Attributes:
        items: Items belonging to the served page (a copy of the input slice)
        current_page: Validated (clamped) page number actually served
        total_pages: Number of pages, at least 1 even for an empty sequence
        total_items: Size of the full input sequence
        page_size: Items per page, as requested
        edit_id: Opaque caller-supplied tag, passed through unchanged
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[T, ...] = ()
    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    total_items: int = Field(ge=0)
    page_size: int = Field(gt=0)
    edit_id: str = "None"

    @model_validator(mode="after")
    def check_page_bounds(self) -> PageResult[T]:
        """Ensure the page metadata is internally consistent."""
        expected_pages = max(1, -(-self.total_items // self.page_size))
        if self.total_pages != expected_pages:
            raise ValueError(
                f"total_pages must be {expected_pages} for {self.total_items} items "
                f"at page_size {self.page_size}, got {self.total_pages}"
            )
        if self.current_page > self.total_pages:
            raise ValueError(
                f"current_page ({self.current_page}) exceeds total_pages ({self.total_pages})"
            )
        if len(self.items) > self.page_size:
            raise ValueError(
                f"page holds {len(self.items)} items, more than page_size ({self.page_size})"
            )
        return self

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_page(self) -> int:
        return self.current_page - 1 if self.has_previous else 1

    @property
    def next_page(self) -> int:
        return self.current_page + 1 if self.has_next else self.total_pages

    # Template-facing aliases
    @property
    def page_number(self) -> int:
        return self.current_page

    @property
    def page_count(self) -> int:
        return self.total_pages

    @property
    def item_count(self) -> int:
        return self.total_items
