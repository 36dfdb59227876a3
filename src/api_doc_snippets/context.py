"""Per-exchange collection of pending snippet writers.

A ``DocumentingContext`` is created when documentation is set up, filled by
the fluent ``DocumentFilter`` calls and drained by the HTTP adapter:
request writers run before the request is sent, response writers once the
response arrived, after which the context is cleared. A failing writer never
stops the exchange; its error is recorded in the ``ExchangeReport``.
"""

import logging
import threading
from enum import Enum
from pathlib import Path

from api_doc_snippets.errors import ContextStateError, SnippetFailuresError, SnippetValidationError
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.snippet.base import SnippetWriter

logger = logging.getLogger(__name__)


class ContextState(str, Enum):
    ACTIVE = "active"
    DRAINING_REQUEST = "draining-request"
    DRAINING_RESPONSE = "draining-response"
    CLEARED = "cleared"


class SnippetFailure:
    """The error raised by one snippet writer."""

    def __init__(self, snippet: SnippetWriter, error: Exception):
        self.snippet = snippet
        self.error = error

    @property
    def is_validation(self) -> bool:
        return isinstance(self.error, SnippetValidationError)

    def __repr__(self) -> str:
        return f"SnippetFailure({self.snippet!r}, {self.error!r})"


class ExchangeReport:
    """Outcome of draining a context: written files and writer failures."""

    def __init__(self):
        self.written: list[Path] = []
        self.failures: list[SnippetFailure] = []

    @property
    def ok(self) -> bool:
        return not self.failures

    def extend(self, other: "ExchangeReport") -> "ExchangeReport":
        self.written.extend(other.written)
        self.failures.extend(other.failures)
        return self

    def raise_for_failures(self) -> None:
        if self.failures:
            raise SnippetFailuresError(self.failures)


class DocumentingContext:
    def __init__(self, output_dir: str | Path):
        self.output_dir = output_dir
        self.request_writers: list[SnippetWriter] = []
        self.response_writers: list[SnippetWriter] = []
        self.state = ContextState.ACTIVE
        self._lock = threading.Lock()

    def _expect(self, *states: ContextState) -> None:
        if self.state not in states:
            raise ContextStateError(
                f"Documenting context is {self.state.value}, expected {' or '.join(s.value for s in states)}"
            )

    def add_request_writer(self, writer: SnippetWriter) -> None:
        with self._lock:
            self._expect(ContextState.ACTIVE)
            self.request_writers.append(writer)

    def add_response_writer(self, writer: SnippetWriter) -> None:
        with self._lock:
            self._expect(ContextState.ACTIVE)
            self.response_writers.append(writer)

    def claim(self) -> bool:
        """Move an ACTIVE context to DRAINING_REQUEST; ``False`` if another caller got there first."""
        with self._lock:
            if self.state is not ContextState.ACTIVE:
                return False
            self.state = ContextState.DRAINING_REQUEST
            return True

    def drain_request(self, exchange: Exchange) -> ExchangeReport:
        """Claim the context and run every request writer, in registration order, against ``exchange``."""
        if not self.claim():
            raise ContextStateError(f"Documenting context is {self.state.value}, expected active")
        return self.drain_claimed_request(exchange)

    def drain_claimed_request(self, exchange: Exchange) -> ExchangeReport:
        """Run the request writers of a context already taken with ``claim()``."""
        self._expect(ContextState.DRAINING_REQUEST)
        return self._run(self.request_writers, exchange)

    def drain_response(self, exchange: Exchange) -> ExchangeReport:
        """Run every response writer, then clear the context whatever happened."""
        self._expect(ContextState.ACTIVE, ContextState.DRAINING_REQUEST)
        self.state = ContextState.DRAINING_RESPONSE
        try:
            return self._run(self.response_writers, exchange)
        finally:
            self.clear()

    def clear(self) -> None:
        with self._lock:
            self.request_writers = []
            self.response_writers = []
            self.state = ContextState.CLEARED

    @property
    def is_cleared(self) -> bool:
        return self.state is ContextState.CLEARED

    def _run(self, writers: list[SnippetWriter], exchange: Exchange) -> ExchangeReport:
        report = ExchangeReport()
        for writer in writers:
            try:
                report.written.extend(writer.handle(exchange))
            except Exception as e:
                logger.debug("Snippet %r failed: %s", writer, e)
                report.failures.append(SnippetFailure(writer, e))
        return report
