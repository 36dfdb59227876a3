import json

import pytest

from api_doc_snippets.errors import FieldTypeRequiredError, SnippetValidationError
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.exchange.captured import CapturedRequest, CapturedResponse
from api_doc_snippets.payload.descriptor import FieldType, field_with_path
from api_doc_snippets.payload.snippet import RequestFieldsSnippet, ResponseFieldsSnippet
from api_doc_snippets.payload.table import build_field_tables
from api_doc_snippets.payload.validator import validate_fields


def _response_exchange(payload) -> Exchange:
    return Exchange(
        CapturedRequest(uri="http://host/items/1"),
        CapturedResponse(status=200, header_map={"Content-Type": "application/json"}, content=json.dumps(payload)),
    )


OWNER = field_with_path("owner", description="Who owns it").with_children(
    field_with_path("name", description="Owner name"),
)


class TestBuildFieldTables:
    def test_nested_table_per_child_descriptor(self):
        payload = {"id": 1, "owner": {"name": "Alice"}}
        tables = build_field_tables("response-fields", payload, [field_with_path("id", description="Id"), OWNER])
        assert [t.name for t in tables] == ["response-fields", "response-fields-owner"]
        assert tables[0].rows == [
            ("id", "Number", "Id"),
            ("owner", "Object", "Who owns it <<response-fields-owner,Show child attributes>>"),
        ]
        assert tables[1].parent_path == "owner"
        assert tables[1].rows == [("name", "String", "Owner name")]

    def test_declared_type_wins(self):
        tables = build_field_tables("t", {"id": "abc"}, [field_with_path("id", type=FieldType.NUMBER, description="Id")])
        assert tables[0].rows == [("id", "Number", "Id")]

    def test_absent_optional_field_needs_type(self):
        with pytest.raises(FieldTypeRequiredError):
            build_field_tables("t", {}, [field_with_path("id", optional=True, description="Id")])

    def test_absent_optional_parent_with_typed_children(self):
        owner = field_with_path("owner", optional=True, description="Owner").with_children(
            field_with_path("name", type=FieldType.STRING, description="Name"),
        )
        payload = {"id": 1}
        validate_fields(payload, [field_with_path("id", description="Id"), owner])
        tables = build_field_tables("t", payload, [field_with_path("id", description="Id"), owner])
        assert tables[0].rows[1] == ("owner", "Object", "Owner <<t-owner,Show child attributes>>")
        assert tables[1].rows == [("name", "String", "Name")]

    def test_array_children_file_name(self):
        items = field_with_path("items[]", description="Items").with_children(
            field_with_path("id", description="Item id"),
        )
        tables = build_field_tables("t", {"items": [{"id": 1}]}, [items])
        assert tables[0].rows[0][1] == "Array"
        assert tables[1].name == "t-items"
        assert tables[1].rows == [("id", "Number", "Item id")]


class TestResponseFieldsSnippet:
    def test_render_files(self):
        snippet = ResponseFieldsSnippet("out", [field_with_path("id", description="The id"), OWNER])
        rendered = snippet.render(_response_exchange({"id": 1, "owner": {"name": "Alice"}}))
        assert list(rendered) == ["response-fields", "response-fields-owner"]
        assert "|Attribute|Type|Description" in rendered["response-fields"]
        assert "|id\n|Number\n|The id" in rendered["response-fields"]
        assert "[[response-fields-owner]]" in rendered["response-fields-owner"]
        assert ".Child attributes of owner" in rendered["response-fields-owner"]
        assert "|name\n|String\n|Owner name" in rendered["response-fields-owner"]

    def test_handle_writes_nested_files(self, tmp_path):
        snippet = ResponseFieldsSnippet(tmp_path, [field_with_path("id", description="The id"), OWNER])
        paths = snippet.handle(_response_exchange({"id": 1, "owner": {"name": "Alice"}}))
        assert paths == [tmp_path / "response-fields.adoc", tmp_path / "response-fields-owner.adoc"]

    def test_validation_failure_writes_nothing(self, tmp_path):
        snippet = ResponseFieldsSnippet(tmp_path, [field_with_path("id", description="The id")])
        with pytest.raises(SnippetValidationError):
            snippet.handle(_response_exchange({"name": "x"}))
        assert list(tmp_path.iterdir()) == []

    def test_description_required(self):
        with pytest.raises(ValueError, match="no description"):
            ResponseFieldsSnippet("out", [field_with_path("id")])

    def test_duplicate_paths_rejected(self):
        with pytest.raises(ValueError, match="more than once"):
            ResponseFieldsSnippet("out", [field_with_path("id", description="a"), field_with_path("id", description="b")])


class TestRequestFieldsSnippet:
    def test_request_payload(self):
        exchange = Exchange(CapturedRequest(method_name="POST", uri="http://host/items", content='{"name": "x"}'))
        rendered = RequestFieldsSnippet("out", [field_with_path("name", description="Name")]).render(exchange)
        assert "|name\n|String\n|Name" in rendered["request-fields"]

    def test_empty_body_reports_missing_fields(self):
        exchange = Exchange(CapturedRequest(method_name="POST", uri="http://host/items"))
        with pytest.raises(SnippetValidationError, match="name"):
            RequestFieldsSnippet("out", [field_with_path("name", description="Name")]).render(exchange)
