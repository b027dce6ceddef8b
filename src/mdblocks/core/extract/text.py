"""Plain-text extraction from syntax nodes"""

from mdblocks.core.nodes import Code, InlineCode, Link, SyntaxNode, Text, children_of


def extract_text(node: SyntaxNode) -> str:
    """Concatenate every text payload under node, in document order."""
    if isinstance(node, (Text, InlineCode, Code)):
        return node.value
    return ''.join(extract_text(child) for child in children_of(node))


def title_text(children: tuple) -> str:
    """Flatten a heading's inline content (emphasis, links, code spans) to plain text."""
    parts = []
    for node in children:
        if isinstance(node, (Text, InlineCode)):
            parts.append(node.value)
        else:
            parts.append(title_text(children_of(node)))
    return ''.join(parts).strip()


def title_markup(children: tuple) -> str:
    """Approximate the markdown source of a heading's inline content.

    Links are written back as [text](url) so bare URLs survive for the
    header URL scan; formatting other than code spans is dropped.
    """
    parts = []
    for node in children:
        if isinstance(node, Text):
            parts.append(node.value)
        elif isinstance(node, Link):
            parts.append(f"[{title_markup(node.children)}]({node.url})")
        elif isinstance(node, InlineCode):
            parts.append(f"`{node.value}`")
        else:
            parts.append(title_markup(children_of(node)))
    return ''.join(parts)
