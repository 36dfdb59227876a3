"""Checks a payload against its field descriptors."""

import copy
import json

from api_doc_snippets.errors import SnippetValidationError
from api_doc_snippets.payload.descriptor import FieldDescriptor, join_path
from api_doc_snippets.payload.extractor import MISSING, extract_field, remove_field


def documented_paths(descriptors: list[FieldDescriptor], parent: str = "") -> list[str]:
    """Full paths of every leaf descriptor, children included."""
    paths = []
    for descriptor in descriptors:
        path = join_path(parent, descriptor.path)
        if descriptor.has_children:
            paths.extend(documented_paths(descriptor.children, path))
        else:
            paths.append(path)
    return paths


def find_missing_fields(payload, descriptors: list[FieldDescriptor], parent: str = "") -> list[str]:
    """Paths of required leaf fields that are absent from ``payload``.

    The children of an optional parent that is absent are not required.
    """
    missing = []
    for descriptor in descriptors:
        path = join_path(parent, descriptor.path)
        if descriptor.optional and descriptor.has_children and extract_field(path, payload) is MISSING:
            continue
        if descriptor.has_children:
            missing.extend(find_missing_fields(payload, descriptor.children, path))
        elif not descriptor.optional and extract_field(path, payload) is MISSING:
            missing.append(path)
    return missing


def find_undocumented_fields(payload, descriptors: list[FieldDescriptor]):
    """Return what is left of ``payload`` once every documented field is removed."""
    remainder = copy.deepcopy(payload)
    for path in documented_paths(descriptors):
        remove_field(path, remainder)
    return remainder


def validate_fields(payload, descriptors: list[FieldDescriptor]) -> None:
    """Raise ``SnippetValidationError`` listing every missing and undocumented field."""
    violations = []
    missing = find_missing_fields(payload, descriptors)
    if missing:
        violations.append(
            f"Fields with the following paths were not found in the payload: {missing}"
        )
    remainder = find_undocumented_fields(payload, descriptors)
    if remainder not in ({}, []):
        violations.append(
            "The following parts of the payload were not documented:\n"
            + json.dumps(remainder, indent=2)
        )
    if violations:
        raise SnippetValidationError(violations)
