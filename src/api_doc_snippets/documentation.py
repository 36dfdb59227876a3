"""Entry point for documenting an exchange made with ``requests``.

    docs = document("items/get", variant="json").with_response_fields(
        field_with_path("id", description="The item's id"),
    )
    response = docs.session().get("http://localhost:8080/items/1")
"""

from pathlib import Path

import requests

from api_doc_snippets.adapter import DocumentingAdapter
from api_doc_snippets.config import SnippetConfig
from api_doc_snippets.context import DocumentingContext, ExchangeReport
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.hypermedia.extractors import LinkExtractor
from api_doc_snippets.hypermedia.links import LinkDescriptor
from api_doc_snippets.hypermedia.snippet import LinksSnippet
from api_doc_snippets.payload.descriptor import FieldDescriptor
from api_doc_snippets.payload.snippet import RequestFieldsSnippet, ResponseFieldsSnippet
from api_doc_snippets.snippet.curl import CurlRequestSnippet
from api_doc_snippets.snippet.http import HttpRequestSnippet, HttpResponseSnippet
from api_doc_snippets.snippet.parameters import (
    ParamDescriptor,
    PathParametersSnippet,
    QueryParametersSnippet,
)


class DocumentFilter:
    """Fluent builder registering snippet writers on a documenting context."""

    def __init__(self, output_dir: str | Path, variant: str | None = None, config: SnippetConfig | None = None):
        self.output_dir = output_dir
        self.variant = variant
        self.config = config or SnippetConfig()
        self.context = DocumentingContext(output_dir)
        self.context.add_request_writer(CurlRequestSnippet(output_dir, variant, self.config))
        self.context.add_request_writer(HttpRequestSnippet(output_dir, variant, self.config))
        self.context.add_response_writer(HttpResponseSnippet(output_dir, variant, self.config))

    def with_links(self, *descriptors: LinkDescriptor, extractor: LinkExtractor | None = None) -> "DocumentFilter":
        """Document the response's links.

        Links are extracted with ``extractor`` or, when it is omitted, with the
        extractor registered for the response's content type. Undocumented or
        missing relations fail the snippet.
        """
        self.context.add_response_writer(LinksSnippet(self.output_dir, list(descriptors), extractor, self.config))
        return self

    def with_request_fields(self, *descriptors: FieldDescriptor) -> "DocumentFilter":
        self.context.add_request_writer(RequestFieldsSnippet(self.output_dir, list(descriptors), self.config))
        return self

    def with_response_fields(self, *descriptors: FieldDescriptor) -> "DocumentFilter":
        self.context.add_response_writer(ResponseFieldsSnippet(self.output_dir, list(descriptors), self.config))
        return self

    def with_request_path_params(self, *descriptors: ParamDescriptor, template: str | None = None) -> "DocumentFilter":
        self.context.add_request_writer(
            PathParametersSnippet(self.output_dir, list(descriptors), template=template, config=self.config)
        )
        return self

    def with_request_query_params(self, *descriptors: ParamDescriptor) -> "DocumentFilter":
        self.context.add_request_writer(QueryParametersSnippet(self.output_dir, list(descriptors), self.config))
        return self

    def run(self, exchange: Exchange) -> ExchangeReport:
        """Document an already captured exchange without sending anything."""
        report = self.context.drain_request(Exchange(exchange.request))
        if exchange.response is None:
            self.context.clear()
            return report
        return report.extend(self.context.drain_response(exchange))

    def adapter(self) -> DocumentingAdapter:
        return DocumentingAdapter(self.context, self.config)

    def session(self, session: requests.Session | None = None) -> requests.Session:
        """Mount a documenting adapter on ``session`` (a new one by default)."""
        session = session or requests.Session()
        adapter = self.adapter()
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session


def document(output_dir: str | Path, variant: str | None = None, config: SnippetConfig | None = None) -> DocumentFilter:
    """Start documenting the next exchange into ``output_dir``."""
    return DocumentFilter(output_dir, variant, config)
