from __future__ import annotations
from pathlib import Path


def head_line(path: Path) -> str | None:
    """
    Return the first line of the given file with leading & trailing
    whitespace stripped.  If the file does not exist, is empty, or is not
    valid UTF-8, return `None`.
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (FileNotFoundError, UnicodeDecodeError):
        return None
    if not lines:
        return None
    return lines[0].strip()
