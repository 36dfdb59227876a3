"""Exceptions raised while documenting an HTTP exchange."""


class DocumentationError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(DocumentationError):
    """The documentation setup cannot work, e.g. no link extractor for a content type."""


class FieldTypeRequiredError(DocumentationError):
    """A field is absent from the payload and its descriptor declares no type."""


class ContextStateError(DocumentationError):
    """A documenting context was used outside the state that allows the call."""


class SnippetValidationError(DocumentationError, AssertionError):
    """Declared fields, parameters or links do not match the exchange."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("\n".join(violations))


class SnippetFailuresError(DocumentationError, AssertionError):
    """One or more snippet writers failed while documenting an exchange."""

    def __init__(self, failures: list):
        self.failures = failures
        lines = [f"{len(failures)} snippet(s) failed:"]
        for failure in failures:
            lines.append(f"  {failure.snippet}: {failure.error}")
        super().__init__("\n".join(lines))
