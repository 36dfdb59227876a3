"""CLI entry point for api-doc-snippets."""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from api_doc_snippets.config import SnippetConfig
from api_doc_snippets.documentation import DocumentFilter, document
from api_doc_snippets.exchange.captured import load_exchange
from api_doc_snippets.hypermedia.extractors import atom_links, hal_links
from api_doc_snippets.hypermedia.links import LinkDescriptor
from api_doc_snippets.payload.descriptor import FieldDescriptor
from api_doc_snippets.snippet.curl import format_curl_command
from api_doc_snippets.snippet.parameters import ParamDescriptor

LINK_EXTRACTORS = {"hal": hal_links, "atom": atom_links}


def _load_capture(file_path: Path) -> dict:
    """Load a capture file written as YAML or JSON."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        data = json.loads(text)
    if not isinstance(data, dict) or "request" not in data:
        raise click.BadParameter(f"{file_path} has no 'request' section")
    return data


def _build_filter(snippets: dict, output: Path, variant: str | None, config: SnippetConfig) -> DocumentFilter:
    """Register the writers declared in the ``snippets`` section of a capture."""
    docs = document(output, variant=variant, config=config)
    if snippets.get("request_fields"):
        docs.with_request_fields(*(FieldDescriptor.model_validate(d) for d in snippets["request_fields"]))
    if snippets.get("path_parameters"):
        docs.with_request_path_params(
            *(ParamDescriptor.model_validate(d) for d in snippets["path_parameters"]),
            template=snippets.get("path_template"),
        )
    if snippets.get("query_parameters"):
        docs.with_request_query_params(*(ParamDescriptor.model_validate(d) for d in snippets["query_parameters"]))
    if snippets.get("response_fields"):
        docs.with_response_fields(*(FieldDescriptor.model_validate(d) for d in snippets["response_fields"]))
    if snippets.get("links"):
        extractor_name = snippets.get("link_extractor")
        if extractor_name and extractor_name not in LINK_EXTRACTORS:
            raise click.BadParameter(
                f"Unknown link_extractor '{extractor_name}', expected one of {sorted(LINK_EXTRACTORS)}"
            )
        extractor = LINK_EXTRACTORS[extractor_name]() if extractor_name else None
        docs.with_links(*(LinkDescriptor.model_validate(d) for d in snippets["links"]), extractor=extractor)
    return docs


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
def main(verbose: bool):
    """API Doc Snippets: render Asciidoctor snippets from captured HTTP exchanges."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("capture_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory for snippets.")
@click.option("--variant", default=None, help="Suffix for the curl/http snippet file names.")
@click.option("--strict/--no-strict", default=True, help="Exit with an error when a snippet fails.")
def render(capture_path: Path, output: Path, variant: str | None, strict: bool):
    """Render every snippet declared in a capture file."""
    click.echo(f"Reading exchange from {capture_path}...")
    data = _load_capture(capture_path)
    exchange = load_exchange(data)

    config = SnippetConfig(strict=strict)
    docs = _build_filter(data.get("snippets") or {}, output, variant, config)
    report = docs.run(exchange)

    for path in report.written:
        click.echo(f"  Created {path}")
    for failure in report.failures:
        click.echo(f"  Failed {failure.snippet}: {failure.error}", err=True)

    click.echo(f"Wrote {len(report.written)} files in {output}")
    if strict and not report.ok:
        sys.exit(1)


@main.command()
@click.argument("capture_path", type=click.Path(exists=True, path_type=Path))
def curl(capture_path: Path):
    """Print the cURL command reproducing the captured request."""
    exchange = load_exchange(_load_capture(capture_path))
    click.echo(format_curl_command(exchange.request))
