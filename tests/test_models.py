"""Tests for marketplace data models."""

import pytest
from pydantic import ValidationError

from haex_marketplace.models import (
    CategoryWithCount,
    ExtensionListItem,
    ListExtensionsParams,
    Pagination,
    dump_response,
)


class TestResponseModels:
    """Wire format handling of response records."""

    def test_camel_case_aliases(self, list_item):
        """Test that camelCase fields map to snake_case attributes."""
        item = ExtensionListItem.model_validate(list_item)
        assert item.short_description == "The notes extension"
        assert item.total_downloads == 1200
        assert item.category.slug == "productivity"

    def test_unknown_fields_are_kept(self, list_item):
        """Test that fields added by the server survive a round trip."""
        body = {**list_item, "featured": True}
        item = ExtensionListItem.model_validate(body)
        assert dump_response(item)["featured"] is True

    def test_absent_fields_get_defaults_but_are_not_dumped(self):
        """Test that missing fields read as defaults and stay out of the dump."""
        body = {"slug": "tools", "name": "Tools"}
        category = CategoryWithCount.model_validate(body)

        assert category.created_at is None
        assert category.extension_count == 0
        assert dump_response(category) == body

    def test_explicit_nulls_are_dumped(self):
        """Test that a null the server sent is kept in the dump."""
        body = {"slug": "tools", "description": None}
        assert dump_response(CategoryWithCount.model_validate(body)) == body

    def test_partial_pagination(self):
        """Test that pagination fields are all optional."""
        pagination = Pagination.model_validate({"page": 1, "limit": 20, "total": 0})
        assert pagination.total_pages == 0
        assert dump_response(pagination) == {"page": 1, "limit": 20, "total": 0}

    def test_addressing_key_is_required(self):
        """Test that a record without its slug is not accepted."""
        with pytest.raises(ValidationError):
            ExtensionListItem.model_validate({"name": "Notes"})


class TestParamModels:
    """Query parameter models."""

    def test_snake_case_names(self):
        """Test that params accept their field names."""
        params = ListExtensionsParams(page=1, sort="updated")
        assert params.model_dump(exclude_none=True) == {"page": 1, "sort": "updated"}

    def test_unknown_params_are_rejected(self):
        """Test that unknown filters raise instead of being dropped."""
        with pytest.raises(ValidationError):
            ListExtensionsParams(order="asc")
