"""Hyperlink collection from syntax nodes and raw heading markup"""

import re

from mdblocks.core.nodes import Code, Link, SyntaxNode, children_of


URL_RE = re.compile(r'(https?://[^\s)]+)', re.IGNORECASE)


def extract_urls(node: SyntaxNode) -> list[str]:
    """Return link targets under node in document order (duplicates kept)."""
    if isinstance(node, Code):
        return []
    urls = [node.url] if isinstance(node, Link) and node.url else []
    for child in children_of(node):
        urls.extend(extract_urls(child))
    return urls


def urls_in_markup(markup: str) -> list[str]:
    """Return bare http(s) URLs found in a raw markup string."""
    return URL_RE.findall(markup or '')
