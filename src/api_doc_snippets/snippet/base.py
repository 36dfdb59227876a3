"""Base class for snippet writers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from api_doc_snippets.config import SnippetConfig
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.writer import DocumentationWriter

logger = logging.getLogger(__name__)


class SnippetWriter(ABC):
    """Renders one kind of snippet from an exchange into ``<output_dir>/<file_name>``."""

    def __init__(self, output_dir: str | Path, file_name: str, config: SnippetConfig | None = None):
        self.output_dir = output_dir
        self.file_name = file_name
        self.config = config or SnippetConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.file_name!r})"

    @abstractmethod
    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        """Write the snippet body for ``exchange``."""

    def render(self, exchange: Exchange) -> dict[str, str]:
        """Return ``{file_name: content}`` for every file this snippet produces."""
        writer = DocumentationWriter()
        self.write(exchange, writer)
        return {self.file_name: writer.getvalue()}

    def handle(self, exchange: Exchange) -> list[Path]:
        """Render the snippet and write its files. Returns the written paths."""
        rendered = self.render(exchange)
        written = []
        for file_name, content in rendered.items():
            path = self.config.resolve(self.output_dir, file_name)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding=self.config.encoding)
            logger.debug("Wrote snippet %s", path)
            written.append(path)
        return written


def variant_file_name(base: str, variant: str | None) -> str:
    """Append a lower-cased variant to a snippet file name."""
    return base if variant is None else f"{base}-{variant.lower()}"
