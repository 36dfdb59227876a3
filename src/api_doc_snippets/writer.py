"""In-memory Asciidoctor writer used by every snippet."""

import io
from contextlib import contextmanager


class DocumentationWriter:
    """Accumulates Asciidoctor markup; callers supply content and structure only."""

    def __init__(self):
        self._buffer = io.StringIO()

    def print(self, text: str) -> None:
        self._buffer.write(text)

    def println(self, text: str = "") -> None:
        self._buffer.write(f"{text}\n")

    def anchor(self, anchor_id: str) -> None:
        self.println(f"[[{anchor_id}]]")

    def title(self, text: str) -> None:
        self.println(f".{text}")

    @contextmanager
    def code_block(self, language: str | None = None):
        self.println()
        if language:
            self.println(f"[source,{language}]")
        self.println("----")
        yield self
        self.println("----")
        self.println()

    @contextmanager
    def shell_command(self):
        with self.code_block("bash"):
            self.print("$ ")
            yield self

    def table(self, headers: list[str], rows: list[tuple[str, ...]]) -> None:
        self.println("|===")
        self.println("|" + "|".join(headers))
        for row in rows:
            self.println()
            for cell in row:
                self.println(f"|{cell}")
        self.println()
        self.println("|===")

    def getvalue(self) -> str:
        return self._buffer.getvalue()
