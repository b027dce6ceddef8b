"""Unit tests for core/models.py"""

import pytest
from pydantic import ValidationError

from mdblocks.core.models import CodeBlock, ContentBlock, ParseResult


@pytest.fixture(name="block")
def block_fixture():
    return ContentBlock(
        path_titles=["JS"],
        block_title="Arrays",
        block_level=2,
        text_content="About arrays.",
        code_blocks=[CodeBlock(content="const a=[1];", language="js")],
    )


def test_content_block_is_frozen(block):
    """Emitted blocks cannot be reassigned after segmentation."""
    with pytest.raises(ValidationError):
        block.block_title = "Changed"
    assert block.block_title == "Arrays"


def test_code_block_is_frozen(block):
    with pytest.raises(ValidationError):
        block.code_blocks[0].is_foldable = True
    assert block.code_blocks[0].is_foldable is False


def test_parse_result_is_frozen(block):
    result = ParseResult(file_path="a.md", main_category="JS", sub_category="a", blocks=[block])
    with pytest.raises(ValidationError):
        result.file_path = "b.md"


def test_frozen_blocks_are_hashable():
    """Frozen blocks compare by value; a CodeBlock can key a dict."""
    a = CodeBlock(content="x", language="py")
    assert {a: 1}[CodeBlock(content="x", language="py")] == 1


def test_block_level_bounds():
    with pytest.raises(ValidationError):
        ContentBlock(block_title="T", block_level=7)
