"""Adapters exposing ``requests`` objects as documentable requests/responses."""

import requests

from api_doc_snippets.exchange.base import DocumentableRequest, DocumentableResponse


class RequestsRequest(DocumentableRequest):
    """A ``requests.PreparedRequest`` about to be sent."""

    def __init__(self, prepared: requests.PreparedRequest):
        self.prepared = prepared

    @property
    def method(self) -> str:
        return (self.prepared.method or "GET").upper()

    @property
    def url(self) -> str:
        return self.prepared.url or ""

    @property
    def headers(self) -> dict[str, list[str]]:
        return {name: [value] for name, value in self.prepared.headers.items()}

    @property
    def body(self) -> bytes:
        body = self.prepared.body
        if body is None:
            return b""
        if isinstance(body, str):
            return body.encode("utf-8")
        if isinstance(body, bytes):
            return body
        # Streamed bodies (files, generators) can only be read once
        return b""


class RequestsResponse(DocumentableResponse):
    """A ``requests.Response`` whose content has already been buffered."""

    def __init__(self, response: requests.Response):
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def reason(self) -> str:
        return self.response.reason or super().reason

    @property
    def headers(self) -> dict[str, list[str]]:
        raw_headers = getattr(self.response.raw, "headers", None)
        if raw_headers is not None and hasattr(raw_headers, "getlist"):
            return {name: raw_headers.getlist(name) for name in raw_headers.keys()}
        return {name: [value] for name, value in self.response.headers.items()}

    @property
    def body(self) -> bytes:
        return self.response.content or b""
