"""Tests for work item field validation."""

import pytest

from workboard.c2_work_item_service.validation import (
    require,
    validate_description,
    validate_estimated_hours,
    validate_priority,
    validate_priority_order,
    validate_status,
    validate_story_points,
    validate_title,
    validate_type,
    validate_update_fields,
)
from workboard.core.errors import ValidationError


class TestRequire:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values_rejected(self, value):
        with pytest.raises(ValidationError, match="ID is required"):
            require(value, "ID is required")

    def test_present_value_accepted(self):
        require("abc", "ID is required")


class TestTitleAndDescription:

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_title("   ")

    def test_title_length_limit(self):
        validate_title("x" * 200)
        with pytest.raises(ValidationError, match="less than 200"):
            validate_title("x" * 201)

    def test_description_optional_and_bounded(self):
        validate_description(None)
        validate_description("x" * 2000)
        with pytest.raises(ValidationError, match="less than 2000"):
            validate_description("x" * 2001)


class TestEnumFields:

    def test_valid_values(self):
        validate_type("bug")
        validate_status("in_progress")
        validate_priority("critical")

    def test_invalid_type_lists_allowed_values(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_type("epic")
        assert exc_info.value.details == {"allowed": ["task", "bug", "story"]}

    def test_invalid_status(self):
        with pytest.raises(ValidationError, match="Invalid work item status"):
            validate_status("blocked")

    def test_invalid_priority(self):
        with pytest.raises(ValidationError, match="Invalid work item priority"):
            validate_priority("urgent")


class TestNumericRanges:

    @pytest.mark.parametrize("value", [None, 1, 50, 100])
    def test_story_points_in_range(self, value):
        validate_story_points(value)

    @pytest.mark.parametrize("value", [0, 101, -5, 2.5, "5", True])
    def test_story_points_out_of_range(self, value):
        with pytest.raises(ValidationError, match="between 1 and 100"):
            validate_story_points(value)

    @pytest.mark.parametrize("value", [None, 1, 1000])
    def test_estimated_hours_in_range(self, value):
        validate_estimated_hours(value)

    @pytest.mark.parametrize("value", [0, 1001])
    def test_estimated_hours_out_of_range(self, value):
        with pytest.raises(ValidationError, match="between 1 and 1000"):
            validate_estimated_hours(value)

    @pytest.mark.parametrize("value", [0, 1, 999])
    def test_priority_order_non_negative(self, value):
        validate_priority_order(value)

    @pytest.mark.parametrize("value", [-1, 1.5, None, "3", False])
    def test_priority_order_rejected(self, value):
        with pytest.raises(ValidationError, match="non-negative integer"):
            validate_priority_order(value)


class TestValidateUpdateFields:

    def test_partial_update_accepted(self):
        validate_update_fields({"title": "New title", "story_points": 8})

    def test_empty_update_accepted(self):
        validate_update_fields({})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="cannot be updated: priority_order, project_id"):
            validate_update_fields({"project_id": "p2", "priority_order": 0})

    def test_each_field_uses_creation_rule(self):
        with pytest.raises(ValidationError):
            validate_update_fields({"title": ""})
        with pytest.raises(ValidationError):
            validate_update_fields({"type": "epic"})
        with pytest.raises(ValidationError):
            validate_update_fields({"estimated_hours": 0})
