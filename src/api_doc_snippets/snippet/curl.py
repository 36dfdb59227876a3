"""cURL command snippet."""

from api_doc_snippets.exchange.base import DocumentableRequest, Exchange
from api_doc_snippets.snippet.base import SnippetWriter, variant_file_name
from api_doc_snippets.writer import DocumentationWriter


def _escape(text: str) -> str:
    return text.replace("&", "\\&")


def format_curl_command(request: DocumentableRequest) -> str:
    """Format ``request`` as a single-line cURL invocation."""
    parts = ["curl", _escape(request.url), "-i"]
    if not request.is_get:
        parts.append(f"-X {request.method}")
    for name, values in request.headers.items():
        for value in values:
            parts.append(f'-H "{name}: {value}"')
    if request.content_length > 0:
        parts.append(f"-d '{_escape(request.content_as_string())}'")
    elif request.is_post:
        query_string = request.parameter_query_string()
        if query_string:
            parts.append(f"-d '{_escape(query_string)}'")
    return " ".join(parts)


class CurlRequestSnippet(SnippetWriter):
    """Documents the request as the cURL command that reproduces it."""

    def __init__(self, output_dir, variant: str | None = None, config=None):
        super().__init__(output_dir, variant_file_name("curl-request", variant), config)

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        with writer.shell_command():
            writer.println(format_curl_command(exchange.request))
