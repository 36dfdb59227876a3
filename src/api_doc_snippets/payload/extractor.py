"""Path-based lookup, typing and removal of fields in a JSON payload.

Paths are dot-separated keys. ``name[]`` steps into every element of the
array at ``name`` and a leading ``[]`` addresses a top-level array, so
``items[].id`` matches the ``id`` of each item.
"""

from api_doc_snippets.errors import FieldTypeRequiredError
from api_doc_snippets.payload.descriptor import FieldType


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def parse_path(path: str) -> list[tuple[str, bool]]:
    """Split ``path`` into ``(key, is_array)`` segments."""
    segments = []
    for part in path.split("."):
        is_array = part.endswith("[]")
        segments.append((part[:-2] if is_array else part, is_array))
    return segments


def _matches(node, segments: list[tuple[str, bool]]) -> list:
    if not segments:
        return [node]
    key, is_array = segments[0]
    rest = segments[1:]
    if key:
        if not isinstance(node, dict) or key not in node:
            return []
        node = node[key]
    if not is_array:
        return _matches(node, rest)
    if not isinstance(node, list):
        return []
    if not rest:
        return [node]
    values = []
    for item in node:
        values.extend(_matches(item, rest))
    return values


def extract_field(path: str, payload):
    """Return every value matched by ``path``, or ``MISSING`` when there is none.

    A JSON ``null`` is a present value.
    """
    values = _matches(payload, parse_path(path))
    return values if values else MISSING


def field_type_of(value) -> FieldType:
    if value is None:
        return FieldType.NULL
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldType.NUMBER
    if isinstance(value, str):
        return FieldType.STRING
    if isinstance(value, dict):
        return FieldType.OBJECT
    if isinstance(value, list):
        return FieldType.ARRAY
    raise TypeError(f"Unsupported payload value: {value!r}")


def resolve_field_type(path: str, payload) -> FieldType:
    """Infer the type of the field at ``path`` from the values it matches."""
    values = extract_field(path, payload)
    if values is MISSING:
        raise FieldTypeRequiredError(
            f"Cannot determine the type of the field '{path}' as it is not present "
            "in the payload. Declare its type on the field descriptor."
        )
    types = {field_type_of(value) for value in values}
    if len(types) == 1:
        return types.pop()
    return FieldType.VARIES


def _is_empty(value) -> bool:
    return isinstance(value, (dict, list)) and not value


def _remove(node, segments: list[tuple[str, bool]]) -> None:
    key, is_array = segments[0]
    rest = segments[1:]
    if key:
        if not isinstance(node, dict) or key not in node:
            return
        if not rest:
            del node[key]
            return
        target = node[key]
    else:
        target = node
    if is_array:
        if not isinstance(target, list):
            return
        if rest:
            for item in target:
                _remove(item, rest)
            target[:] = [item for item in target if not _is_empty(item)]
        else:
            target.clear()
    else:
        _remove(target, rest)
    if key and _is_empty(target):
        del node[key]


def remove_field(path: str, payload) -> None:
    """Remove the field at ``path`` from ``payload`` in place.

    Objects and arrays left empty by the removal are removed as well.
    """
    _remove(payload, parse_path(path))
