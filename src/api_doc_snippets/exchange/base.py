"""Capability interfaces shared by every request/response source.

Snippet writers only talk to ``DocumentableRequest`` and
``DocumentableResponse``; each HTTP source (a ``requests`` exchange, a
capture file) provides one adapter implementing them.
"""

from abc import ABC, abstractmethod
from http import HTTPStatus
from urllib.parse import parse_qs, urlencode, urlsplit

from api_doc_snippets.prettify import prettify

FORM_URLENCODED = "application/x-www-form-urlencoded"


def parse_media_type(content_type: str | None) -> tuple[str | None, str | None]:
    """Split a Content-Type header into (mime type, charset)."""
    if not content_type:
        return None, None
    mime, _, params = content_type.partition(";")
    charset = None
    for param in params.split(";"):
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset" and value:
            charset = value.strip('"')
    return mime.strip().lower(), charset


def header_value(headers: dict[str, list[str]], name: str) -> str | None:
    """Return the first value of a header, matching its name case-insensitively."""
    for key, values in headers.items():
        if key.lower() == name.lower() and values:
            return values[0]
    return None


def _decode(body: bytes, content_type: str | None) -> str:
    _, charset = parse_media_type(content_type)
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class DocumentableRequest(ABC):
    """An outgoing HTTP request as seen by snippet writers."""

    @property
    @abstractmethod
    def method(self) -> str: ...

    @property
    @abstractmethod
    def url(self) -> str:
        """Absolute URL including the query string."""

    @property
    @abstractmethod
    def headers(self) -> dict[str, list[str]]: ...

    @property
    @abstractmethod
    def body(self) -> bytes: ...

    @property
    def form_parameters(self) -> dict[str, list[str]]:
        return {}

    @property
    def is_get(self) -> bool:
        return self.method == "GET"

    @property
    def is_post(self) -> bool:
        return self.method == "POST"

    @property
    def host(self) -> str:
        return urlsplit(self.url).netloc

    @property
    def path_with_query(self) -> str:
        parts = urlsplit(self.url)
        path = parts.path or "/"
        return f"{path}?{parts.query}" if parts.query else path

    @property
    def query_parameters(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.url).query, keep_blank_values=True)

    @property
    def content_type(self) -> str | None:
        return header_value(self.headers, "Content-Type")

    @property
    def content_length(self) -> int:
        return len(self.body)

    def parameter_query_string(self) -> str:
        """URL-encode the form parameters, or return ``""`` when there are none."""
        return urlencode(self.form_parameters, doseq=True)

    def content_as_string(self, prettify_content: bool = False) -> str:
        text = _decode(self.body, self.content_type)
        if prettify_content:
            return prettify(text, self.content_type)
        return text


class DocumentableResponse(ABC):
    """A received HTTP response as seen by snippet writers."""

    @property
    @abstractmethod
    def status_code(self) -> int: ...

    @property
    @abstractmethod
    def headers(self) -> dict[str, list[str]]: ...

    @property
    @abstractmethod
    def body(self) -> bytes: ...

    @property
    def reason(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""

    @property
    def content_type(self) -> str | None:
        return header_value(self.headers, "Content-Type")

    def content_as_string(self, prettify_content: bool = False) -> str:
        text = _decode(self.body, self.content_type)
        if prettify_content:
            return prettify(text, self.content_type)
        return text


class Exchange:
    """A request and, once received, its response.

    Snippet writers borrow an exchange for a single ``handle`` call; the
    response is ``None`` while request-phase writers run.
    """

    def __init__(self, request: DocumentableRequest, response: DocumentableResponse | None = None):
        self.request = request
        self.response = response

    def require_response(self) -> DocumentableResponse:
        if self.response is None:
            raise ValueError("This snippet needs a response, but the exchange has none yet")
        return self.response
