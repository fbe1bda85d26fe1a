"""
RecipeBox Backend: Recipe Document Helper Tests
=================================================

What:  Tests for document assembly, id parsing and BSON → JSON conversion.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from bson import Decimal128, ObjectId

from recipebox.exceptions import InvalidIdentifierError
from recipebox.models.recipe import (
    SUMMARY_PROJECTION,
    build_recipe_document,
    missing_required_fields,
    parse_object_id,
    to_jsonable,
)


class TestParseObjectId:

    def test_valid_hex_string(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    def test_object_id_passes_through(self):
        oid = ObjectId()
        assert parse_object_id(oid) is oid

    @pytest.mark.parametrize("value", ["abc", "g" * 24, None, 42])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_object_id(value)
        assert exc_info.value.context["id"] == str(value)


class TestMissingRequiredFields:

    def test_complete_draft(self):
        draft = {
            "name": "Soup",
            "cuisine": "French",
            "ingredients": "water",
            "instructions": "boil",
            "tags": ["warm"],
        }
        assert missing_required_fields(draft) == []

    def test_reports_in_declaration_order(self):
        assert missing_required_fields({"tags": None, "name": ""}) == [
            "name",
            "cuisine",
            "ingredients",
            "instructions",
            "tags",
        ]

    def test_empty_containers_count_as_present(self):
        draft = {
            "name": "Soup",
            "cuisine": "French",
            "ingredients": {},
            "instructions": [],
            "tags": [],
        }
        assert missing_required_fields(draft) == []

    @pytest.mark.parametrize("blank", [None, "", 0, 0.0, False])
    def test_blank_scalars_are_missing(self, blank):
        draft = {
            "name": blank,
            "cuisine": "French",
            "ingredients": "water",
            "instructions": "boil",
            "tags": ["warm"],
        }
        assert missing_required_fields(draft) == ["name"]

    def test_optional_fields_not_required(self):
        draft = {
            "name": "Soup",
            "cuisine": "French",
            "ingredients": "water",
            "instructions": "boil",
            "tags": ["warm"],
            "prepTime": None,
        }
        assert missing_required_fields(draft) == []


class TestBuildRecipeDocument:

    def test_embeds_copies_of_references(self):
        cuisine = {"_id": ObjectId(), "name": "Thai"}
        tags = [{"_id": ObjectId(), "name": "spicy"}]
        draft = {
            "name": "Green Curry",
            "cuisine": "Thai",
            "ingredients": ["curry paste"],
            "instructions": ["simmer"],
            "tags": ["spicy", "unknown"],
            "cookTime": 30,
            "unexpected": "dropped",
        }

        document = build_recipe_document(draft, cuisine, tags)

        assert document == {
            "name": "Green Curry",
            "cuisine": cuisine,
            "prepTime": None,
            "cookTime": 30,
            "servings": None,
            "ingredients": ["curry paste"],
            "instructions": ["simmer"],
            "tags": tags,
        }
        assert document["cuisine"] is not cuisine
        assert "_id" not in document


class TestToJsonable:

    def test_nested_object_ids(self):
        rid, cid, tid = ObjectId(), ObjectId(), ObjectId()
        document = {
            "_id": rid,
            "cuisine": {"_id": cid, "name": "Thai"},
            "tags": [{"_id": tid, "name": "spicy"}],
        }

        assert to_jsonable(document) == {
            "_id": str(rid),
            "cuisine": {"_id": str(cid), "name": "Thai"},
            "tags": [{"_id": str(tid), "name": "spicy"}],
        }

    def test_datetime_and_scalars(self):
        moment = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert to_jsonable({"at": moment, "n": 3, "s": "x", "none": None}) == {
            "at": "2024-01-15T12:00:00+00:00",
            "n": 3,
            "s": "x",
            "none": None,
        }

    def test_decimal128_becomes_string(self):
        document = {"prepTime": Decimal128("12.50"), "tags": [{"weight": Decimal128(Decimal("1"))}]}

        assert to_jsonable(document) == {"prepTime": "12.50", "tags": [{"weight": "1"}]}


def test_summary_projection_fields():
    assert set(SUMMARY_PROJECTION) == {"name", "cuisine", "tags", "prepTime"}
