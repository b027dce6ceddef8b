"""Main/sub category derivation from '/'-separated file paths"""

from typing import Optional


UNKNOWN = "Unknown"


def derive_categories(file_path: str, anchor: Optional[str]) -> tuple[str, str]:
    """Return (main_category, sub_category) for file_path; never raises.

    main_category is the segment right after the first `anchor` segment,
    sub_category is the file name without its final extension.
    e.g. '/obsval/FrontEnd/SBORNICK/JS/Array.md' -> ('JS', 'Array')
    """
    parts = (file_path or '').split('/')

    main = UNKNOWN
    if anchor and anchor in parts:
        i = parts.index(anchor)
        if i + 1 < len(parts) and parts[i + 1]:
            main = parts[i + 1]

    name = parts[-1]
    if not name:
        return main, UNKNOWN
    dot = name.rfind('.')
    return main, name[:dot] if dot > 0 else name
