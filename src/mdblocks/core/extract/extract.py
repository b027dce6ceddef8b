"""Single-pass segmentation of a document tree into hierarchical content blocks"""

from pathlib import Path
from typing import Optional

from mdblocks.config import Settings
from mdblocks.core.extract.blocks import BlockAssembler
from mdblocks.core.extract.stack import HeadingPathStack
from mdblocks.core.extract.text import title_markup, title_text
from mdblocks.core.logging import get_logger
from mdblocks.core.models import ContentBlock, ParseResult
from mdblocks.core.nodes import Container, Heading
from mdblocks.core.parse import build_tree, strip_frontmatter
from mdblocks.core.utils.category import derive_categories


logger = get_logger(__name__)


def segment(
    root: Container,
    file_path: str,
    anchor: Optional[str] = "SBORNICK",
    untitled: str = "Untitled",
    frontmatter: dict = None,
    ) -> ParseResult:
    """Walk the root's top-level nodes once and return the ordered content blocks.

    Nodes before the first heading have no path and are dropped. Nested
    structure (list items, quotes, tables) is flattened into the text of
    the block it appears in.
    """
    stack = HeadingPathStack()
    assembler = BlockAssembler(stack)
    blocks: list[ContentBlock] = []

    def _close() -> None:
        block = assembler.finalize()
        if block is not None:
            blocks.append(block)

    for node in root.children:
        if isinstance(node, Heading):
            _close()
            stack.push(
                depth=node.depth,
                title=title_text(node.children) or untitled,
                raw_title=title_markup(node.children),
            )
        else:
            assembler.append(node)
    _close()
    stack.clear()

    main_category, sub_category = derive_categories(file_path, anchor)
    logger.debug("Segmented %s into %d block(s)", file_path, len(blocks))
    return ParseResult(
        file_path=file_path,
        main_category=main_category,
        sub_category=sub_category,
        blocks=blocks,
        frontmatter=frontmatter or {},
    )


def parse_markdown(markdown: str, file_path: str, settings: Settings = None) -> ParseResult:
    """Parse markdown text into a ParseResult; file_path only feeds the categories."""
    settings = settings or Settings()
    frontmatter, body = {}, markdown
    if settings.strip_frontmatter:
        frontmatter, body = strip_frontmatter(markdown)
    root = build_tree(body, settings.parser_config)
    return segment(root, file_path, settings.anchor, settings.untitled, frontmatter)


def parse_file(path: Path, settings: Settings = None) -> ParseResult:
    """Read a UTF-8 markdown file and parse it, using its posix path for categories."""
    raw = path.read_text(encoding='utf-8')
    return parse_markdown(raw, path.as_posix(), settings)
