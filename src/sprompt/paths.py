from __future__ import annotations
from pathlib import PurePosixPath

#: Number of trailing path components shown in short mode
SHORT_PATH_PARTS = 3


def abbreviate(
    path: str,
    *,
    home: str | None = None,
    short: bool = False,
    repo_root: str | None = None,
) -> str:
    """
    Format the path to the current working directory for display.  If the
    directory is at or under ``home``, the path will start with ``~``.

    If ``short`` is true, only the last `SHORT_PATH_PARTS` components of the
    path are kept.  If ``repo_root`` is also given (the name of the top-level
    directory of the enclosing repository), leading components are further
    dropped so that the path is shown starting from the repository's root
    directory.
    """
    path = contract_home(path, home)
    if not short:
        return path
    parts = path.split("/")[-SHORT_PATH_PARTS:]
    if repo_root is not None:
        if len(parts) >= 2 and parts[-2] == repo_root:
            parts = parts[-2:]
        elif len(parts) >= 3 and parts[-3] == repo_root:
            parts = parts[-1:]
    return "/".join(parts)


def contract_home(path: str, home: str | None) -> str:
    """
    If ``path`` is at or under the directory ``home``, replace that prefix
    with ``~``; otherwise, return ``path`` unchanged.
    """
    if not home or home == "/":
        return path
    try:
        rel = PurePosixPath(path).relative_to(PurePosixPath(home))
    except ValueError:
        return path
    return str("~" / rel)
