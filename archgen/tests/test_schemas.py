"""
Tests: RequirementsRecord construction and submission filtering.

Run with:
    pytest archgen/tests/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError

from archgen.models.schemas import LIST_FIELDS, RequirementsRecord


class TestRequirementsRecord:
    def test_defaults_are_empty(self):
        record = RequirementsRecord()
        assert record.system_name == ""
        for field in LIST_FIELDS:
            assert getattr(record, field) == []

    def test_camel_case_and_snake_case(self):
        camel = RequirementsRecord.model_validate({"systemName": "Shop", "mainFeatures": ["Cart"]})
        snake = RequirementsRecord.model_validate({"system_name": "Shop", "main_features": ["Cart"]})
        assert camel == snake

    def test_blank_entries_dropped_kept_entries_verbatim(self):
        record = RequirementsRecord(
            mainFeatures=["", "  Cart ", "   ", "\t", "Search"],
            integrations=["", " "],
        )
        assert record.main_features == ["  Cart ", "Search"]
        assert record.integrations == []

    def test_byte_order_mark_counts_as_blank(self):
        record = RequirementsRecord(mainFeatures=["\ufeff", " \ufeff\u00a0", "\ufeffCart"])
        assert record.main_features == ["\ufeffCart"]

    def test_every_list_field_is_filtered(self):
        record = RequirementsRecord.model_validate(
            {field: ["x", " "] for field in LIST_FIELDS}
        )
        for field in LIST_FIELDS:
            assert getattr(record, field) == ["x"]

    def test_record_is_frozen(self):
        record = RequirementsRecord(systemName="Shop")
        with pytest.raises(ValidationError):
            record.system_name = "Other"

    def test_dump_uses_camel_case(self):
        data = RequirementsRecord(systemName="Shop").model_dump(by_alias=True)
        assert data["systemName"] == "Shop"
        assert "additionalContext" in data
