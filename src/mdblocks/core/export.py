"""Export pipeline: serialize parse results and records to JSON files"""

import json
from pathlib import Path

from mdblocks.core.models import ParseResult
from mdblocks.core.records import to_records


def build_records_json(result: ParseResult) -> dict:
    """Return {"file": ..., "blocks": [...]} in persistence record shape."""
    file_record, block_records = to_records(result)
    return {
        "file": file_record.model_dump(),
        "blocks": [r.model_dump() for r in block_records],
    }


def render(result: ParseResult, fmt: str = 'result') -> str:
    """Render a ParseResult as indented JSON in the given format (result or records)."""
    if fmt == 'records':
        return json.dumps(build_records_json(result), indent=2, ensure_ascii=False)
    if fmt == 'result':
        return result.model_dump_json(indent=2)
    raise ValueError(f"Unknown output format: {fmt!r}")


def output_path(file_path: str, output_dir: Path) -> Path:
    """Mirror the source path under output_dir, appending .json to the full file name.

    The source suffix is kept so a.md and a.mdx never share an output file.
    Absolute source paths are re-rooted so output never escapes output_dir.
    """
    src = Path(file_path)
    parent = Path(*src.parent.parts[1:]) if src.is_absolute() else src.parent
    return output_dir / parent / f"{src.name}.json"


def write_result(result: ParseResult, output_dir: Path, fmt: str = 'result') -> Path:
    """Write one JSON file for result and return its path."""
    dest = output_path(result.file_path, output_dir)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(render(result, fmt), encoding='utf-8')
    return dest
