"""Batch extraction: discover files, parse each in isolation, export JSON"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from mdblocks.config import Settings
from mdblocks.core.export import write_result
from mdblocks.core.extract.extract import parse_file
from mdblocks.core.logging import get_logger
from mdblocks.core.models import ParseResult
from mdblocks.core.parse import discover_files


logger = get_logger(__name__)


@dataclass
class BatchSummary:
    """Outcome of a batch run; a failed file never stops the rest."""
    processed_files: int = 0
    parsed_files: int = 0
    total_blocks: int = 0
    outputs: list[tuple[Path, Path]] = field(default_factory=list)   # (source, json file)
    errors: list[tuple[str, str]] = field(default_factory=list)      # (source, message)

    @property
    def ok(self) -> bool:
        return not self.errors


def _parse_one(path: Path, settings: Settings) -> ParseResult | Exception:
    """Parse a single file, returning the exception instead of raising it."""
    try:
        return parse_file(path, settings)
    except Exception as e:
        logger.exception("Failed to parse %s", path)
        return e


def parse_many(paths: list[Path], settings: Settings) -> list[ParseResult | Exception]:
    """Parse paths independently, in order; threads are used when settings.workers > 1."""
    if settings.workers > 1 and len(paths) > 1:
        logger.info("Parsing %d files with %d workers", len(paths), settings.workers)
        with ThreadPoolExecutor(max_workers=settings.workers) as executor:
            return list(executor.map(lambda p: _parse_one(p, settings), paths))
    return [_parse_one(p, settings) for p in paths]


def run_extract(path: str, settings: Settings = None, output_dir: Path = None) -> BatchSummary:
    """Parse every markdown file under path and write one JSON file per document.

    Failures (unreadable files, invalid frontmatter, write errors) are recorded
    in the summary and processing continues with the next file.
    """
    settings = settings or Settings()
    output_dir = Path(output_dir or settings.output_dir)
    files = discover_files(Path(path))
    summary = BatchSummary()
    logger.info("Found %d markdown file(s) under %s", len(files), path)

    for src, outcome in zip(files, parse_many(files, settings)):
        summary.processed_files += 1
        if isinstance(outcome, Exception):
            summary.errors.append((src.as_posix(), str(outcome)))
            continue
        try:
            out_file = write_result(outcome, output_dir, settings.output_format)
        except (OSError, ValueError) as e:
            logger.exception("Failed to export %s", src)
            summary.errors.append((src.as_posix(), str(e)))
            continue
        summary.parsed_files += 1
        summary.total_blocks += len(outcome.blocks)
        summary.outputs.append((src, out_file))
        logger.info("Wrote %d block(s) for %s to %s", len(outcome.blocks), src, out_file)

    return summary
