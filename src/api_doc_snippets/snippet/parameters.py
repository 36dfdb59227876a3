"""Path and query parameter snippets."""

import re

from pydantic import BaseModel, ConfigDict

from api_doc_snippets.errors import SnippetValidationError
from api_doc_snippets.exchange.base import Exchange
from api_doc_snippets.snippet.base import SnippetWriter
from api_doc_snippets.writer import DocumentationWriter

TEMPLATE_VARIABLE = re.compile(r"\{([^}/]+)\}")


class ParamDescriptor(BaseModel):
    """A documented request parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    optional: bool = False
    description: str = ""


def param_with_name(name: str, **attributes) -> ParamDescriptor:
    return ParamDescriptor(name=name, **attributes)


class ParametersSnippet(SnippetWriter):
    """Tabulates parameter descriptors after checking them against the request."""

    column_name = "Parameter"
    label = "Parameters"

    def __init__(self, output_dir, file_name: str, descriptors: list[ParamDescriptor], config=None):
        super().__init__(output_dir, f"{file_name}-params", config)
        self.descriptors = list(descriptors)

    def actual_names(self, exchange: Exchange) -> set[str] | None:
        """Names present in the request, or ``None`` when they cannot be known."""
        return None

    def validate(self, exchange: Exchange) -> None:
        actual = self.actual_names(exchange)
        if actual is None:
            return
        declared = {d.name for d in self.descriptors}
        required = {d.name for d in self.descriptors if not d.optional}
        undocumented = actual - declared
        missing = required - actual
        violations = []
        if undocumented:
            violations.append(f"{self.label} with the following names were not documented: {sorted(undocumented)}")
        if missing:
            violations.append(f"{self.label} with the following names were not found in the request: {sorted(missing)}")
        if violations:
            raise SnippetValidationError(violations)

    def write(self, exchange: Exchange, writer: DocumentationWriter) -> None:
        self.validate(exchange)
        writer.table(
            [self.column_name, "Description"],
            [(d.name, d.description) for d in self.descriptors],
        )


class QueryParametersSnippet(ParametersSnippet):
    column_name = "Query Parameter"
    label = "Query parameters"

    def __init__(self, output_dir, descriptors: list[ParamDescriptor], config=None):
        super().__init__(output_dir, "request-query", descriptors, config)

    def actual_names(self, exchange: Exchange) -> set[str]:
        return set(exchange.request.query_parameters)


class PathParametersSnippet(ParametersSnippet):
    """Path parameters; validated only when the URL template is known."""

    column_name = "Request Parameter"
    label = "Path parameters"

    def __init__(self, output_dir, descriptors: list[ParamDescriptor], template: str | None = None, config=None):
        super().__init__(output_dir, "request-path", descriptors, config)
        self.template = template

    def actual_names(self, exchange: Exchange) -> set[str] | None:
        if self.template is None:
            return None
        return set(TEMPLATE_VARIABLE.findall(self.template))
