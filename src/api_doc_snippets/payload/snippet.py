"""Request and response field snippets."""

import json
from abc import abstractmethod

from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.payload.descriptor import FieldDescriptor, ensure_unique_paths
from api_doc_snippets.payload.table import FIELD_TABLE_HEADERS, FieldTable, build_field_tables
from api_doc_snippets.payload.validator import validate_fields
from api_doc_snippets.snippet.base import SnippetWriter
from api_doc_snippets.writer import DocumentationWriter


def _check_descriptions(descriptors) -> None:
    for descriptor in descriptors:
        if descriptor.has_children:
            _check_descriptions(descriptor.children)
        elif not descriptor.description.strip():
            raise ValueError(f"Field '{descriptor.path}' has no description")


class FieldsSnippet(SnippetWriter):
    """Validates a JSON payload against its descriptors and tabulates the fields.

    Every nested descriptor produces an extra file named after the nested
    path, cross-referenced from the row of its parent.
    """

    def __init__(self, output_dir, kind: str, descriptors: list[FieldDescriptor], config=None):
        super().__init__(output_dir, f"{kind}-fields", config)
        ensure_unique_paths(descriptors)
        _check_descriptions(descriptors)
        self.descriptors = list(descriptors)

    @abstractmethod
    def payload_text(self, exchange: Exchange) -> str: ...

    def payload(self, exchange: Exchange):
        text = self.payload_text(exchange).strip()
        return json.loads(text) if text else {}

    def tables(self, exchange: Exchange) -> list[FieldTable]:
        payload = self.payload(exchange)
        validate_fields(payload, self.descriptors)
        return build_field_tables(self.file_name, payload, self.descriptors)

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        self._write_table(writer, self.tables(exchange)[0])

    def render(self, exchange: Exchange) -> dict[str, str]:
        rendered = {}
        for table in self.tables(exchange):
            writer = DocumentationWriter()
            self._write_table(writer, table)
            rendered[table.name] = writer.getvalue()
        return rendered

    def _write_table(self, writer: DocumentationWriter, table: FieldTable) -> None:
        if table.parent_path:
            writer.anchor(table.name)
            writer.title(f"Child attributes of {table.parent_path}")
        writer.table(FIELD_TABLE_HEADERS, table.rows)


class RequestFieldsSnippet(FieldsSnippet):
    def __init__(self, output_dir, descriptors: list[FieldDescriptor], config=None):
        super().__init__(output_dir, "request", descriptors, config)

    def payload_text(self, exchange: Exchange) -> str:
        return exchange.request.content_as_string()


class ResponseFieldsSnippet(FieldsSnippet):
    def __init__(self, output_dir, descriptors: list[FieldDescriptor], config=None):
        super().__init__(output_dir, "response", descriptors, config)

    def payload_text(self, exchange: Exchange) -> str:
        return exchange.require_response().content_as_string()
