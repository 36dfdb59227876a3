"""Strategies that pull ``{rel: [links]}`` out of a response body."""

import json
from abc import ABC, abstractmethod

from api_doc_snippets.exchange.base import parse_media_type
from api_doc_snippets.hypermedia.links import Link


def _has_string(entry, key: str) -> bool:
    return isinstance(entry, dict) and isinstance(entry.get(key), str)


class LinkExtractor(ABC):
    @abstractmethod
    def extract_links(self, content: str) -> dict[str, list[Link]]:
        """Return the links in ``content`` grouped by relation."""


class HalLinkExtractor(LinkExtractor):
    """Links in HAL format: a ``_links`` object keyed by relation."""

    def extract_links(self, content: str) -> dict[str, list[Link]]:
        payload = json.loads(content) if content.strip() else {}
        links: dict[str, list[Link]] = {}
        if not isinstance(payload, dict):
            return links
        relations = payload.get("_links")
        if not isinstance(relations, dict):
            return links
        for rel, value in relations.items():
            entries = value if isinstance(value, list) else [value]
            found = [Link(rel=rel, href=entry["href"]) for entry in entries if _has_string(entry, "href")]
            if found:
                links[rel] = found
        return links


class AtomLinkExtractor(LinkExtractor):
    """Links in Atom format: a ``links`` array of ``{rel, href}`` objects."""

    def extract_links(self, content: str) -> dict[str, list[Link]]:
        payload = json.loads(content) if content.strip() else {}
        links: dict[str, list[Link]] = {}
        if not isinstance(payload, dict):
            return links
        entries = payload.get("links")
        if not isinstance(entries, list):
            return links
        for entry in entries:
            if _has_string(entry, "rel") and _has_string(entry, "href"):
                links.setdefault(entry["rel"], []).append(Link(rel=entry["rel"], href=entry["href"]))
        return links


def hal_links() -> LinkExtractor:
    return HalLinkExtractor()


def atom_links() -> LinkExtractor:
    return AtomLinkExtractor()


EXTRACTORS_BY_CONTENT_TYPE = {
    "application/hal+json": HalLinkExtractor,
    "application/json": AtomLinkExtractor,
}


def extractor_for_content_type(content_type: str | None) -> LinkExtractor | None:
    """Return the extractor registered for ``content_type``, or ``None``."""
    mime, _ = parse_media_type(content_type)
    extractor_class = EXTRACTORS_BY_CONTENT_TYPE.get(mime)
    return extractor_class() if extractor_class else None
