from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
import logging
import os
from pathlib import Path, PurePath
import subprocess
from typing import Protocol
import pygit2
from .util import head_line

log = logging.getLogger(__name__)

#: Name of the backend used when none is configured
DEFAULT_BACKEND = "pygit2"


@dataclass(frozen=True)
class GitContext:
    #: The short name of the current branch (e.g., ``main``), or `None` if it
    #: could not be determined.  For a repository without any commits, this
    #: is taken from the raw contents of ``HEAD``.
    branch: str | None

    #: The name of the repository's top-level working tree directory, or
    #: `None` if there is no working tree
    repo_root_name: str | None


class GitRepo(Protocol):
    """The queries that a version-control backend must answer"""

    def branch(self) -> str | None: ...

    def repo_root_name(self) -> str | None: ...


class Pygit2Repo:
    """A repository accessed in-process via libgit2"""

    def __init__(self, repo: pygit2.Repository) -> None:
        self.repo = repo

    @classmethod
    def discover(cls, cwd: Path) -> Pygit2Repo | None:
        """
        Open the repository containing ``cwd`` (searching upwards through its
        parent directories), or return `None` if there is no such repository
        """
        try:
            # libgit2 does not read $GIT_CEILING_DIRECTORIES on its own
            ceiling = os.environ.get("GIT_CEILING_DIRECTORIES")
            if ceiling:
                git_dir = pygit2.discover_repository(str(cwd), False, ceiling)
            else:
                git_dir = pygit2.discover_repository(str(cwd))
            if git_dir is None:
                return None
            return cls(pygit2.Repository(git_dir))
        except (pygit2.GitError, ValueError) as e:
            log.debug("Could not open repository at %s: %s", cwd, e)
            return None

    def branch(self) -> str | None:
        try:
            if self.repo.head_is_unborn:
                # A fresh repository with no commits; HEAD names a branch
                # that does not exist yet, so read it from the file.
                return unborn_branch(Path(self.repo.path))
            return self.repo.head.shorthand
        except (pygit2.GitError, OSError, ValueError) as e:
            # ValueError covers branch names that are not valid UTF-8
            log.debug("Could not resolve HEAD: %s", e)
            return None

    def repo_root_name(self) -> str | None:
        workdir = self.repo.workdir
        if workdir is None:
            return None
        return PurePath(workdir).name or None


class GitCommand:
    """A repository accessed by running the ``git`` executable"""

    def __init__(self, cwd: Path, toplevel: str) -> None:
        self.cwd = cwd
        self.toplevel = toplevel

    @classmethod
    def discover(cls, cwd: Path) -> GitCommand | None:
        """
        Return a `GitCommand` for the working tree containing ``cwd``, or
        `None` if ``cwd`` is not in a working tree or Git is not installed
        """
        try:
            toplevel = git("rev-parse", "--show-toplevel", cwd=cwd)
        except OSError as e:
            log.debug("Could not run git in %s: %s", cwd, e)
            return None
        if not toplevel:
            return None
        return cls(cwd, toplevel)

    def branch(self) -> str | None:
        try:
            return git("symbolic-ref", "--short", "HEAD", cwd=self.cwd) or None
        except OSError:
            return None

    def repo_root_name(self) -> str | None:
        return PurePath(self.toplevel).name or None


#: Mapping from backend names to functions that open the repository containing
#: a given directory
BACKENDS: dict[str, Callable[[Path], GitRepo | None]] = {
    "pygit2": Pygit2Repo.discover,
    "subprocess": GitCommand.discover,
}


def resolve(cwd: Path, backend: str = DEFAULT_BACKEND) -> GitContext | None:
    """
    If ``cwd`` is inside a Git repository, return a `GitContext` describing
    the repository's current branch & top-level directory; otherwise, return
    `None`.  Failures to query the repository are never raised.
    """
    repo = BACKENDS[backend](cwd)
    if repo is None:
        log.debug("%s is not inside a Git repository", cwd)
        return None
    return GitContext(branch=repo.branch(), repo_root_name=repo.repo_root_name())


def unborn_branch(git_dir: Path) -> str | None:
    """
    Return the name of the branch that ``HEAD`` in ``git_dir`` refers to,
    taken from the last path component of the first line of the file
    """
    line = head_line(git_dir / "HEAD")
    if not line:
        return None
    return line.split("/")[-1] or None


def git(*args: str, cwd: Path | None = None) -> str | None:
    """
    Run a Git command (suppressing stderr) and return its stdout with leading &
    trailing whitespace stripped.  If the command fails or its output is not
    valid UTF-8, return `None`.
    """
    try:
        return subprocess.run(
            ["git", *args],
            check=True,
            encoding="utf-8",
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            cwd=cwd,
        ).stdout.strip()
    except (subprocess.CalledProcessError, UnicodeDecodeError):
        return None
