"""Pending-content aggregation and ContentBlock finalization between headings"""

from typing import Optional

from mdblocks.core.extract.fence import parse_fence_meta
from mdblocks.core.extract.stack import HeadingPathStack
from mdblocks.core.extract.text import extract_text
from mdblocks.core.extract.urls import extract_urls, urls_in_markup
from mdblocks.core.logging import get_logger
from mdblocks.core.models import CodeBlock, ContentBlock
from mdblocks.core.nodes import Code, Heading, SyntaxNode


logger = get_logger(__name__)


def to_code_block(node: Code) -> CodeBlock:
    """Convert a top-level code node into a CodeBlock with its fold directive."""
    fold = parse_fence_meta(node.meta)
    return CodeBlock(
        content=node.value,
        language=node.lang or None,
        is_foldable=fold.is_foldable,
        fold_title=fold.fold_title,
    )


class BlockAssembler:
    """Collects non-heading nodes under the open heading and closes them into blocks.

    finalize() must run before the stack is changed for an incoming heading,
    so the closing block is titled by the heading that was open until now.
    """

    def __init__(self, stack: HeadingPathStack):
        self.stack = stack
        self.pending: list[SyntaxNode] = []

    def append(self, node: SyntaxNode) -> bool:
        """Queue node for the current block; dropped when no heading is open."""
        if isinstance(node, Heading):
            raise ValueError("headings open blocks; they cannot be appended")
        if not self.stack:
            return False
        self.pending.append(node)
        return True

    def finalize(self) -> Optional[ContentBlock]:
        """Close the pending content into a ContentBlock, or None if there is nothing to keep."""
        nodes, self.pending = self.pending, []
        top = self.stack.current_top()
        if top is None:
            return None

        text = ''
        code_blocks: list[CodeBlock] = []
        body_urls: list[str] = []
        for node in nodes:
            if isinstance(node, Code):
                code_blocks.append(to_code_block(node))
                continue
            text += extract_text(node) + '\n'
            body_urls.extend(extract_urls(node))

        text = text.strip()
        urls = list(dict.fromkeys(urls_in_markup(top.raw_title) + body_urls))

        if not (text or code_blocks or urls):
            logger.debug("Discarding empty block under %r", top.title)
            return None

        return ContentBlock(
            path_titles=self.stack.current_path(),
            block_title=top.title,
            block_level=top.depth,
            text_content=text,
            code_blocks=code_blocks,
            extracted_urls=urls,
        )
