import pytest

from api_doc_snippets.errors import FieldTypeRequiredError
from api_doc_snippets.payload.descriptor import FieldType
from api_doc_snippets.payload.extractor import (
    MISSING,
    extract_field,
    parse_path,
    remove_field,
    resolve_field_type,
)

PAYLOAD = {
    "id": 1,
    "name": "Widget",
    "active": True,
    "note": None,
    "owner": {"name": "Alice", "email": "alice@example.com"},
    "items": [{"id": 1, "sku": "a"}, {"id": 2, "sku": "b"}],
    "mixed": [{"value": 1}, {"value": "one"}],
}


class TestParsePath:
    def test_segments(self):
        assert parse_path("items[].id") == [("items", True), ("id", False)]

    def test_top_level_array(self):
        assert parse_path("[].id") == [("", True), ("id", False)]


class TestExtractField:
    def test_nested_key(self):
        assert extract_field("owner.name", PAYLOAD) == ["Alice"]

    def test_missing(self):
        assert extract_field("owner.phone", PAYLOAD) is MISSING
        assert extract_field("id.value", PAYLOAD) is MISSING

    def test_null_is_present(self):
        assert extract_field("note", PAYLOAD) == [None]

    def test_each_array_element(self):
        assert extract_field("items[].id", PAYLOAD) == [1, 2]

    def test_array_itself(self):
        assert extract_field("items[]", PAYLOAD) == [PAYLOAD["items"]]

    def test_top_level_array(self):
        assert extract_field("[].id", [{"id": 1}, {"id": 2}]) == [1, 2]


class TestResolveFieldType:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("id", FieldType.NUMBER),
            ("name", FieldType.STRING),
            ("active", FieldType.BOOLEAN),
            ("note", FieldType.NULL),
            ("owner", FieldType.OBJECT),
            ("items", FieldType.ARRAY),
            ("items[].sku", FieldType.STRING),
        ],
    )
    def test_inferred_types(self, path, expected):
        assert resolve_field_type(path, PAYLOAD) is expected

    def test_varies_across_elements(self):
        assert resolve_field_type("mixed[].value", PAYLOAD) is FieldType.VARIES

    def test_absent_field_needs_declared_type(self):
        with pytest.raises(FieldTypeRequiredError, match="owner.phone"):
            resolve_field_type("owner.phone", PAYLOAD)


class TestRemoveField:
    def test_removes_leaf(self):
        payload = {"a": {"b": 1, "c": 2}}
        remove_field("a.b", payload)
        assert payload == {"a": {"c": 2}}

    def test_prunes_emptied_objects(self):
        payload = {"a": {"b": 1, "c": 2}}
        remove_field("a.b", payload)
        remove_field("a.c", payload)
        assert payload == {}

    def test_removes_from_every_element(self):
        payload = {"items": [{"id": 1}, {"id": 2}]}
        remove_field("items[].id", payload)
        assert payload == {}

    def test_keeps_other_element_fields(self):
        payload = {"items": [{"id": 1, "sku": "a"}]}
        remove_field("items[].id", payload)
        assert payload == {"items": [{"sku": "a"}]}

    def test_absent_path_is_noop(self):
        payload = {"a": 1}
        remove_field("b.c", payload)
        assert payload == {"a": 1}
