"""Hypermedia links and their descriptors."""

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel: str
    href: str


class LinkDescriptor(BaseModel):
    """A documented link relation. Both fields must be non-empty."""

    model_config = ConfigDict(frozen=True)

    rel: str = Field(min_length=1)
    description: str = Field(min_length=1)


def link_with_rel(rel: str, **attributes) -> LinkDescriptor:
    return LinkDescriptor(rel=rel, **attributes)
