"""Snippet output configuration."""

from pathlib import Path

from pydantic import BaseModel

DEFAULT_FILE_EXTENSION = "adoc"


class SnippetConfig(BaseModel):
    """Where and how snippet files are written.

    A relative output directory given to ``document()`` is resolved against
    ``snippets_dir`` (or the working directory when it is unset).
    """

    snippets_dir: Path | None = None
    file_extension: str = DEFAULT_FILE_EXTENSION
    encoding: str = "utf-8"
    strict: bool = True  # raise once an exchange finishes with snippet failures

    def resolve(self, output_dir: str | Path, file_name: str) -> Path:
        """Return the file path for a snippet named ``file_name``."""
        directory = Path(output_dir)
        if not directory.is_absolute() and self.snippets_dir is not None:
            directory = self.snippets_dir / directory
        return directory / f"{file_name}.{self.file_extension}"
