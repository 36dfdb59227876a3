"""``requests`` transport adapter that drains a documenting context."""

import logging

from requests.adapters import HTTPAdapter

from api_doc_snippets.config import SnippetConfig
from api_doc_snippets.context import DocumentingContext, ExchangeReport
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.exchange.requests_adapter import RequestsRequest, RequestsResponse

logger = logging.getLogger(__name__)


class DocumentingAdapter(HTTPAdapter):
    """Runs the context's snippet writers around the first request sent through it.

    Only the caller that claims the context documents; requests sent while
    it is draining or once it is cleared, from any thread, pass straight through.
    """

    def __init__(self, context: DocumentingContext, config: SnippetConfig | None = None, **kwargs):
        super().__init__(**kwargs)
        self.context = context
        self.config = config or SnippetConfig()
        self.last_report: ExchangeReport | None = None

    def send(self, request, **kwargs):
        if not self.context.claim():
            return super().send(request, **kwargs)

        documentable_request = RequestsRequest(request)
        report = self.context.drain_claimed_request(Exchange(documentable_request))
        try:
            response = super().send(request, **kwargs)
            # Buffer streamed bodies so every writer can read them
            response.content
        except Exception:
            self.context.clear()
            raise

        report.extend(self.context.drain_response(Exchange(documentable_request, RequestsResponse(response))))
        self.last_report = report
        for path in report.written:
            logger.debug("Documented %s %s in %s", request.method, request.url, path)
        for failure in report.failures:
            logger.warning("Snippet %r failed for %s %s: %s", failure.snippet, request.method, request.url, failure.error)
        if self.config.strict:
            report.raise_for_failures()
        return response
