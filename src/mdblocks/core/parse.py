"""File discovery, frontmatter extraction, and markdown-it tree building"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdblocks.core.extract.fence import split_info
from mdblocks.core.nodes import Code, Container, Heading, InlineCode, Link, SyntaxNode, Text


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}

# table parts whose children are joined with a separator so cells and rows stay apart
TABLE_SEPARATORS = {'table': '\n', 'thead': '\n', 'tbody': '\n', 'tr': ' | '}


def make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())


def _interleave(nodes: list[SyntaxNode], sep: str) -> tuple[SyntaxNode, ...]:
    out: list[SyntaxNode] = []
    for i, n in enumerate(nodes):
        if i:
            out.append(Text(sep))
        out.append(n)
    return tuple(out)


def _code_value(content: str) -> str:
    """Drop the line ending that closes a code block body."""
    return content[:-1] if content.endswith('\n') else content


def to_node(node: SyntaxTreeNode) -> SyntaxNode:
    """Convert a markdown-it SyntaxTreeNode (and its subtree) into syntax nodes."""
    kind = node.type
    if kind == 'heading':
        return Heading(depth=int(node.tag[1:]), children=tuple(to_node(c) for c in node.children))
    if kind == 'fence':
        lang, meta = split_info(node.info)
        return Code(value=_code_value(node.content), lang=lang, meta=meta)
    if kind == 'code_block':
        return Code(value=_code_value(node.content))
    if kind == 'text':
        return Text(node.content)
    if kind in ('softbreak', 'hardbreak'):
        return Text('\n')
    if kind in ('html_inline', 'html_block'):
        return Text(node.content)
    if kind == 'code_inline':
        return InlineCode(node.content)
    if kind == 'link':
        return Link(url=str(node.attrs.get('href') or ''), children=tuple(to_node(c) for c in node.children))
    if kind == 'image':
        # alt text is an attribute of the image, not readable content
        return Container('image')
    if kind in TABLE_SEPARATORS:
        return Container(kind, _interleave([to_node(c) for c in node.children], TABLE_SEPARATORS[kind]))
    return Container(kind, tuple(to_node(c) for c in node.children))


def build_tree(markdown: str, preset: str = 'commonmark') -> Container:
    """Tokenize markdown and return the document root as a Container of top-level nodes."""
    tokens = make_parser(preset).parse(markdown)
    return to_node(SyntaxTreeNode(tokens))
