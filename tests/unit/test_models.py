"""Unit tests for page result and page marker models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from page_navigator.models import ELLIPSIS, PageEllipsis, PageMarker, PageNumber, PageResult


class TestPageMarkerModels:
    """Tests for the page marker sum type."""

    def test_number_serializes_with_tag(self) -> None:
        assert PageNumber(value=4).model_dump() == {"type": "number", "value": 4}

    def test_ellipsis_serializes_with_tag(self) -> None:
        assert ELLIPSIS.model_dump() == {"type": "ellipsis"}

    def test_number_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PageNumber(value=0)

    def test_discriminated_union_parses_both_shapes(self) -> None:
        """Serialized markers validate back into the right variant."""
        adapter = TypeAdapter(list[PageMarker])
        markers = adapter.validate_python(
            [{"type": "number", "value": 1}, {"type": "ellipsis"}, {"type": "number", "value": 9}]
        )

        assert markers == [PageNumber(value=1), ELLIPSIS, PageNumber(value=9)]

    def test_unknown_tag_rejected(self) -> None:
        adapter = TypeAdapter(PageMarker)
        with pytest.raises(ValidationError):
            adapter.validate_python({"type": "gap"})

    def test_markers_are_frozen(self) -> None:
        marker = PageNumber(value=2)
        with pytest.raises(ValidationError):
            marker.value = 3  # type: ignore[misc]

    def test_variants_never_compare_equal(self) -> None:
        assert PageNumber(value=1) != PageEllipsis()


class TestPageResult:
    """Tests for PageResult validation and derived fields."""

    def test_valid_result(self) -> None:
        result = PageResult(
            items=("a", "b"), current_page=2, total_pages=2, total_items=12, page_size=10
        )

        assert result.edit_id == "None"
        assert result.has_previous is True
        assert result.has_next is False
        assert result.previous_page == 1
        assert result.next_page == 2

    def test_items_list_is_stored_as_tuple(self) -> None:
        result = PageResult(items=[1, 2], current_page=1, total_pages=1, total_items=2, page_size=5)
        assert result.items == (1, 2)

    def test_middle_page_navigation(self) -> None:
        result = PageResult(
            items=tuple(range(10)), current_page=3, total_pages=5, total_items=50, page_size=10
        )

        assert (result.previous_page, result.next_page) == (2, 4)
        assert result.has_previous and result.has_next

    def test_current_page_beyond_total_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds total_pages"):
            PageResult(items=(), current_page=3, total_pages=2, total_items=15, page_size=10)

    def test_inconsistent_total_pages_rejected(self) -> None:
        with pytest.raises(ValidationError, match="total_pages must be 3"):
            PageResult(items=(), current_page=1, total_pages=4, total_items=25, page_size=10)

    def test_oversized_page_rejected(self) -> None:
        with pytest.raises(ValidationError, match="more than page_size"):
            PageResult(items=(1, 2, 3), current_page=1, total_pages=2, total_items=3, page_size=2)

    def test_empty_result_needs_one_page(self) -> None:
        with pytest.raises(ValidationError):
            PageResult(items=(), current_page=1, total_pages=0, total_items=0, page_size=10)

    @pytest.mark.parametrize("field", ["current_page", "page_size"])
    def test_non_positive_fields_rejected(self, field: str) -> None:
        values = {"items": (), "current_page": 1, "total_pages": 1, "total_items": 0, "page_size": 10}
        values[field] = 0
        with pytest.raises(ValidationError):
            PageResult(**values)

    def test_plain_objects_accepted_as_items(self) -> None:
        """Items of any type validate without extra model configuration."""

        class Task:
            def __init__(self, title: str) -> None:
                self.title = title

        tasks = (Task("a"), Task("b"))
        result = PageResult(items=tasks, current_page=1, total_pages=1, total_items=2, page_size=10)

        assert result.items == tasks
        assert "arbitrary_types_allowed" not in PageResult.model_config
