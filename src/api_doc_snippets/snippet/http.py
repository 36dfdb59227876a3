"""Raw HTTP request and response snippets."""

from api_doc_snippets.exchange.base import (
    FORM_URLENCODED,
    DocumentableRequest,
    DocumentableResponse,
    Exchange,
    header_value,
)
from api_doc_snippets.snippet.base import SnippetWriter, variant_file_name
from api_doc_snippets.writer import DocumentationWriter


def _header_lines(headers: dict[str, list[str]]) -> list[str]:
    return [f"{name}: {value}" for name, values in headers.items() for value in values]


def _requires_form_content_type(request: DocumentableRequest) -> bool:
    return (
        request.content_type is None
        and request.is_post
        and bool(request.parameter_query_string())
    )


def format_http_request(request: DocumentableRequest) -> str:
    """Render ``request`` the way it travels on the wire."""
    lines = [f"{request.method} {request.path_with_query} HTTP/1.1"]
    if header_value(request.headers, "Host") is None and request.host:
        lines.append(f"Host: {request.host}")
    lines.extend(_header_lines(request.headers))
    if _requires_form_content_type(request):
        lines.append(f"Content-Type: {FORM_URLENCODED}")
    lines.append("")
    if request.content_length > 0:
        lines.append(request.content_as_string(prettify_content=True))
    elif request.is_post:
        query_string = request.parameter_query_string()
        if query_string:
            lines.append(query_string)
    return "\n".join(lines)


def format_http_response(response: DocumentableResponse) -> str:
    """Render ``response`` with a status line, headers and a pretty-printed body."""
    lines = [f"HTTP/1.1 {response.status_code} {response.reason}".rstrip()]
    lines.extend(_header_lines(response.headers))
    lines.append("")
    body = response.content_as_string(prettify_content=True)
    if body:
        lines.append(body)
    return "\n".join(lines)


class HttpRequestSnippet(SnippetWriter):
    def __init__(self, output_dir, variant: str | None = None, config=None):
        super().__init__(output_dir, variant_file_name("http-request", variant), config)

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        with writer.code_block("http"):
            writer.println(format_http_request(exchange.request))


class HttpResponseSnippet(SnippetWriter):
    def __init__(self, output_dir, variant: str | None = None, config=None):
        super().__init__(output_dir, variant_file_name("http-response", variant), config)

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        with writer.code_block("http"):
            writer.println(format_http_response(exchange.require_response()))
