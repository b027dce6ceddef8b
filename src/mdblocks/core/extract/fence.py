"""Fold directive parsing for fenced code info strings"""

import re
from typing import Optional

from mdblocks.core.models import FoldDirective


# fold, fold:"Title", fold='Title', fold = "Title"
FOLD_RE = re.compile(r'\bfold\b(?:\s*[:=]?\s*(["\'])(.*?)\1)?')


def parse_fence_meta(meta: Optional[str]) -> FoldDirective:
    """Return the fold directive found in a fence meta string; never raises."""
    if not meta:
        return FoldDirective()
    m = FOLD_RE.search(meta)
    if m is None:
        return FoldDirective()
    title = (m.group(2) or '').strip()
    return FoldDirective(is_foldable=True, fold_title=title or None)


def split_info(info: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split a fence info string into (lang, meta) at the first whitespace."""
    info = (info or '').strip()
    if not info:
        return None, None
    parts = info.split(None, 1)
    meta = parts[1].strip() if len(parts) > 1 else ''
    return parts[0], meta or None
