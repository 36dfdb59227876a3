"""Snippet documenting the hypermedia links of a response."""

from api_doc_snippets.errors import ConfigurationError, SnippetValidationError
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.hypermedia.extractors import LinkExtractor, extractor_for_content_type
from api_doc_snippets.hypermedia.links import Link, LinkDescriptor
from api_doc_snippets.snippet.base import SnippetWriter
from api_doc_snippets.writer import DocumentationWriter


def diff_relations(actual: set[str], declared: set[str]) -> tuple[set[str], set[str]]:
    """Return ``(undocumented, missing)`` relations."""
    return actual - declared, declared - actual


class LinksSnippet(SnippetWriter):
    """Checks a response's links against the declared relations and tabulates them."""

    def __init__(
        self,
        output_dir,
        descriptors: list[LinkDescriptor],
        extractor: LinkExtractor | None = None,
        config=None,
    ):
        super().__init__(output_dir, "links", config)
        self.extractor = extractor
        self.descriptors_by_rel: dict[str, LinkDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.rel in self.descriptors_by_rel:
                raise ValueError(f"Link relation '{descriptor.rel}' is described more than once")
            self.descriptors_by_rel[descriptor.rel] = descriptor

    def extract_links(self, exchange: Exchange) -> dict[str, list[Link]]:
        response = exchange.require_response()
        extractor = self.extractor or extractor_for_content_type(response.content_type)
        if extractor is None:
            raise ConfigurationError(
                "No link extractor has been provided and one is not available for "
                f"the content type {response.content_type}"
            )
        return extractor.extract_links(response.content_as_string())

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        links = self.extract_links(exchange)
        undocumented, missing = diff_relations(set(links), set(self.descriptors_by_rel))
        violations = []
        if undocumented:
            violations.append(
                f"Links with the following relations were not documented: {sorted(undocumented)}"
            )
        if missing:
            violations.append(
                f"Links with the following relations were not found in the response: {sorted(missing)}"
            )
        if violations:
            raise SnippetValidationError(violations)
        writer.table(
            ["Relation", "Description"],
            [(rel, d.description) for rel, d in self.descriptors_by_rel.items()],
        )
