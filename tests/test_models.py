import pytest
from pydantic import ValidationError

from api_doc_snippets.hypermedia.links import LinkDescriptor, link_with_rel
from api_doc_snippets.payload.descriptor import FieldDescriptor, FieldType, field_with_path
from api_doc_snippets.snippet.parameters import ParamDescriptor, param_with_name


class TestFieldDescriptor:
    def test_create_required_field(self):
        d = field_with_path("id", description="The id")
        assert d.path == "id"
        assert d.optional is False
        assert d.type is None
        assert d.children == ()

    def test_path_is_immutable(self):
        d = field_with_path("id", description="The id")
        with pytest.raises(ValidationError):
            d.path = "other"

    def test_with_children_returns_copy(self):
        parent = field_with_path("owner", description="Owner")
        child = field_with_path("name", description="Name")
        nested = parent.with_children(child)
        assert nested.children == (child,)
        assert parent.children == ()
        assert nested.has_children

    def test_children_cannot_have_parent_type(self):
        with pytest.raises(ValidationError):
            field_with_path("owner", type=FieldType.OBJECT, children=[field_with_path("name")])

    def test_duplicate_child_paths_rejected(self):
        with pytest.raises(ValidationError):
            field_with_path("owner", children=[field_with_path("name"), field_with_path("name")])

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            field_with_path("")

    def test_validate_from_mapping(self):
        d = FieldDescriptor.model_validate({
            "path": "owner",
            "description": "Owner",
            "children": [{"path": "age", "type": "Number", "description": "Age"}],
        })
        assert d.children[0].type is FieldType.NUMBER
        assert str(d.children[0].type) == "Number"


class TestParamDescriptor:
    def test_defaults(self):
        p = param_with_name("page", description="Page number")
        assert p == ParamDescriptor(name="page", optional=False, description="Page number")


class TestLinkDescriptor:
    def test_create(self):
        d = link_with_rel("self", description="This resource")
        assert d.rel == "self"

    def test_empty_rel_rejected(self):
        with pytest.raises(ValidationError):
            LinkDescriptor(rel="", description="Nothing")

    def test_missing_description_rejected(self):
        with pytest.raises(ValidationError):
            link_with_rel("self")
