"""Descriptors for the fields of a JSON request or response payload."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class FieldType(str, Enum):
    ARRAY = "Array"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    NUMBER = "Number"
    NULL = "Null"
    STRING = "String"
    VARIES = "Varies"

    def __str__(self) -> str:
        return self.value


class FieldDescriptor(BaseModel):
    """A documented field of a payload.

    ``path`` locates the field (``a.b``, ``items[].id``). A descriptor with
    ``children`` documents a nested object; the children's paths are relative
    to it and it cannot declare a type of its own.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    type: FieldType | None = None
    optional: bool = False
    description: str = ""
    children: tuple["FieldDescriptor", ...] = ()

    @model_validator(mode="after")
    def _check_children(self):
        if not self.path:
            raise ValueError("A field descriptor needs a path")
        if self.children and self.type is not None:
            raise ValueError(f"Field '{self.path}' has child descriptors and cannot also declare a type")
        ensure_unique_paths(self.children)
        return self

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def with_children(self, *children: "FieldDescriptor") -> "FieldDescriptor":
        """Return a copy of this descriptor with ``children`` appended."""
        return FieldDescriptor(
            path=self.path,
            type=self.type,
            optional=self.optional,
            description=self.description,
            children=self.children + children,
        )


def field_with_path(path: str, **attributes) -> FieldDescriptor:
    """Create a descriptor for the field at ``path``."""
    return FieldDescriptor(path=path, **attributes)


def ensure_unique_paths(descriptors) -> None:
    seen = set()
    for descriptor in descriptors:
        if descriptor.path in seen:
            raise ValueError(f"Field '{descriptor.path}' is described more than once")
        seen.add(descriptor.path)


def join_path(parent: str, child: str) -> str:
    if not parent:
        return child
    if child.startswith("["):
        return f"{parent}{child}"
    return f"{parent}.{child}"
