"""Closed set of syntax node types consumed by the segmentation engine"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Heading:
    depth: int                      # 1-6, as written in the source
    children: tuple = ()


@dataclass(frozen=True)
class Code:
    """A fenced or indented code block; value is opaque to extraction."""
    value: str
    lang: Optional[str] = None
    meta: Optional[str] = None


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class InlineCode:
    value: str


@dataclass(frozen=True)
class Link:
    url: str
    children: tuple = ()


@dataclass(frozen=True)
class Container:
    """Any other construct (root, paragraph, list, emphasis, table, image, ...)."""
    type: str
    children: tuple = ()


SyntaxNode = Union[Heading, Code, Text, InlineCode, Link, Container]


def children_of(node: SyntaxNode) -> tuple:
    """Return the child nodes of node, or an empty tuple for leaves."""
    return getattr(node, 'children', ())
