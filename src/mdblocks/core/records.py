"""Flat file/block records handed to a downstream persistence layer"""

from typing import Optional

from pydantic import BaseModel

from mdblocks.core.models import ParseResult


class ContentFileRecord(BaseModel):
    """One record per parsed file."""
    file_path: str
    main_category: str
    sub_category: str


class ContentBlockRecord(BaseModel):
    """One record per content block; only the first code block is carried."""
    order_in_file: int
    path_titles: list[str]
    block_title: str
    block_level: int
    text_content: str
    code_content: Optional[str] = None
    code_language: Optional[str] = None
    is_code_foldable: bool = False
    code_fold_title: Optional[str] = None
    extracted_urls: list[str] = []


def to_records(result: ParseResult) -> tuple[ContentFileRecord, list[ContentBlockRecord]]:
    """Map a ParseResult onto its file record and ordered block records."""
    file_record = ContentFileRecord(
        file_path=result.file_path,
        main_category=result.main_category,
        sub_category=result.sub_category,
    )
    block_records = []
    for index, block in enumerate(result.blocks):
        code = block.code_blocks[0] if block.code_blocks else None
        block_records.append(ContentBlockRecord(
            order_in_file=index,
            path_titles=list(block.path_titles),
            block_title=block.block_title,
            block_level=block.block_level,
            text_content=block.text_content,
            code_content=code.content if code else None,
            code_language=code.language if code else None,
            is_code_foldable=code.is_foldable if code else False,
            code_fold_title=code.fold_title if code else None,
            extracted_urls=list(block.extracted_urls),
        ))
    return file_record, block_records
