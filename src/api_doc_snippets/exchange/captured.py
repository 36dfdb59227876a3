"""Exchanges loaded from capture files (YAML or JSON)."""

import json
from urllib.parse import urljoin

from pydantic import BaseModel, field_validator

from api_doc_snippets.exchange.base import DocumentableRequest, DocumentableResponse, Exchange


def _normalize_headers(value: dict | None) -> dict[str, list[str]]:
    if not value:
        return {}
    headers = {}
    for name, values in value.items():
        if isinstance(values, list):
            headers[name] = [str(v) for v in values]
        else:
            headers[name] = [str(values)]
    return headers


class CapturedRequest(DocumentableRequest, BaseModel):
    """A request recorded outside a live HTTP client.

    ``uri`` may be relative, in which case it is resolved against ``host``.
    """

    method_name: str = "GET"
    uri: str
    target_host: str | None = None
    header_map: dict[str, list[str]] = {}
    content: str = ""
    form: dict[str, list[str]] = {}

    @field_validator("header_map", "form", mode="before")
    @classmethod
    def _to_lists(cls, value):
        return _normalize_headers(value)

    @field_validator("method_name")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()

    @property
    def method(self) -> str:
        return self.method_name

    @property
    def url(self) -> str:
        if self.target_host:
            return urljoin(self.target_host, self.uri)
        return self.uri

    @property
    def headers(self) -> dict[str, list[str]]:
        return self.header_map

    @property
    def body(self) -> bytes:
        return self.content.encode("utf-8")

    @property
    def form_parameters(self) -> dict[str, list[str]]:
        return self.form


class CapturedResponse(DocumentableResponse, BaseModel):
    """A response recorded outside a live HTTP client."""

    status: int = 200
    reason_phrase: str | None = None
    header_map: dict[str, list[str]] = {}
    content: str = ""

    @field_validator("header_map", mode="before")
    @classmethod
    def _to_lists(cls, value):
        return _normalize_headers(value)

    @property
    def status_code(self) -> int:
        return self.status

    @property
    def reason(self) -> str:
        return self.reason_phrase or super().reason

    @property
    def headers(self) -> dict[str, list[str]]:
        return self.header_map

    @property
    def body(self) -> bytes:
        return self.content.encode("utf-8")


def load_exchange(data: dict) -> Exchange:
    """Build an exchange from the ``request``/``response`` mappings of a capture file."""
    req = data["request"]
    request = CapturedRequest(
        method_name=req.get("method", "GET"),
        uri=req["url"],
        target_host=req.get("host"),
        header_map=req.get("headers"),
        content=_body_text(req.get("body")),
        form=req.get("form"),
    )
    response = None
    resp = data.get("response")
    if resp:
        response = CapturedResponse(
            status=resp.get("status", 200),
            reason_phrase=resp.get("reason"),
            header_map=resp.get("headers"),
            content=_body_text(resp.get("body")),
        )
    return Exchange(request, response)


def _body_text(body) -> str:
    if body is None:
        return ""
    if isinstance(body, str):
        return body
    # Structured bodies in YAML captures are re-encoded as JSON
    return json.dumps(body)
