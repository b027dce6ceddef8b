"""Data models for heading paths, code blocks, content blocks and parse results"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CodeBlock(BaseModel):
    """A top-level fenced code block inside a content block."""
    model_config = ConfigDict(frozen=True)

    content: str
    language: Optional[str] = None
    is_foldable: bool = False
    fold_title: Optional[str] = None


class ContentBlock(BaseModel):
    """Content between one heading and the next, titled by that heading."""
    model_config = ConfigDict(frozen=True)

    path_titles: list[str] = []     # ancestors root -> parent, excluding self
    block_title: str
    block_level: int = Field(..., ge=1, le=6)
    text_content: str = ""
    code_blocks: list[CodeBlock] = []
    extracted_urls: list[str] = []  # deduplicated, first-seen order


class ParseResult(BaseModel):
    """Segmentation of a single document; immutable once returned."""
    model_config = ConfigDict(frozen=True)

    file_path: str
    main_category: str
    sub_category: str
    blocks: list[ContentBlock] = []
    frontmatter: dict[str, Any] = {}


@dataclass(frozen=True)
class HeadingPathEntry:
    """An open heading on the path stack; never persisted."""
    title: str
    depth: int
    raw_title: str              # approximate markdown of the heading's inline content


@dataclass(frozen=True)
class FoldDirective:
    is_foldable: bool = False
    fold_title: Optional[str] = None
