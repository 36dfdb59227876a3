"""Turns field descriptors into table rows, one table per nesting level."""

from pydantic import BaseModel

from api_doc_snippets.payload.descriptor import FieldDescriptor, FieldType, join_path
from api_doc_snippets.payload.extractor import resolve_field_type

FIELD_TABLE_HEADERS = ["Attribute", "Type", "Description"]


class FieldTable(BaseModel):
    """Rows of one field table.

    ``name`` doubles as the output file name and the cross-reference anchor;
    ``parent_path`` is empty for the top-level table.
    """

    name: str
    parent_path: str = ""
    rows: list[tuple[str, str, str]] = []


def _file_segment(path: str) -> str:
    return path.replace("[]", "").replace(".", "-").strip("-")


def _nested_row(descriptor: FieldDescriptor, table_name: str) -> tuple[str, str, str]:
    field_type = FieldType.ARRAY if descriptor.path.endswith("[]") else FieldType.OBJECT
    xref = f"<<{table_name},Show child attributes>>"
    description = f"{descriptor.description} {xref}" if descriptor.description else xref
    return descriptor.path, str(field_type), description


def build_field_tables(
    name: str, payload, descriptors: list[FieldDescriptor], parent_path: str = ""
) -> list[FieldTable]:
    """Build the table for ``descriptors`` followed by one table per nested descriptor.

    Declared types win; other types are inferred from the payload.
    """
    table = FieldTable(name=name, parent_path=parent_path)
    nested: list[FieldTable] = []
    for descriptor in descriptors:
        path = join_path(parent_path, descriptor.path)
        if descriptor.has_children:
            child_name = f"{name}-{_file_segment(descriptor.path)}"
            table.rows.append(_nested_row(descriptor, child_name))
            nested.extend(build_field_tables(child_name, payload, list(descriptor.children), path))
        else:
            field_type = descriptor.type or resolve_field_type(path, payload)
            table.rows.append((descriptor.path, str(field_type), descriptor.description))
    return [table, *nested]
