from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from pathlib import Path
from .duration import humanize
from .git import DEFAULT_BACKEND, GitContext, resolve
from .paths import abbreviate
from .styles import Attribute as A
from .styles import Color as C
from .styles import Painter, Shell

log = logging.getLogger(__name__)

#: Commands that run for less than this many seconds do not have their
#: runtime shown
MIN_ELAPSED = 2

#: Shown in place of the current directory when it cannot be determined
UNKNOWN_CWD = "??"

#: Shown before the branch name in Unicode mode
BRANCH_SYMBOL = "\uE0A0 "

#: The prompt separator in Unicode mode
UNICODE_SEPARATOR = "❯"

#: The prompt separator otherwise
ASCII_SEPARATOR = "::"


@dataclass(frozen=True)
class PromptInvocation:
    #: `True` iff the previous command exited with a nonzero status
    failed: bool

    #: The runtime of the previous command in whole seconds
    elapsed: int

    #: Whether to use Unicode symbols
    unicode: bool

    #: Whether to show the current directory in shortened form
    short_path: bool

    shell: Shell


@dataclass
class PromptInfo:
    #: `True` iff we're running as the superuser
    root: bool

    #: The path to the current working directory, or `None` if it could not
    #: be determined
    cwd: str | None

    #: The current user's home directory, or `None` if it could not be
    #: determined
    home: str | None

    git: GitContext | None

    @classmethod
    def get(cls, backend: str = DEFAULT_BACKEND) -> PromptInfo:
        try:
            root = os.getuid() == 0
        except AttributeError:
            # No user IDs on this platform
            root = False

        # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
        cwd: str | None
        try:
            cwd = os.environ.get("PWD") or os.getcwd()
        except OSError as e:
            log.debug("Could not determine current directory: %s", e)
            cwd = None

        home: str | None
        try:
            home = os.environ.get("HOME") or str(Path.home())
        except (KeyError, RuntimeError) as e:
            log.debug("Could not determine home directory: %s", e)
            home = None

        gc = resolve(Path(cwd), backend) if cwd is not None else None

        return cls(root=root, cwd=cwd, home=home, git=gc)

    def cwdstr(self, short: bool = False) -> str:
        """
        Show the path to the current working directory.  If the directory is
        at or under the home directory, the path will start with ``~``.  If
        ``short`` is true, only the last few components of the path are shown,
        starting no higher than the top of the current repository.
        """
        if self.cwd is None:
            return UNKNOWN_CWD
        return abbreviate(
            self.cwd,
            home=self.home,
            short=short,
            repo_root=self.git.repo_root_name if self.git is not None else None,
        )

    def display(self, invocation: PromptInvocation) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        paint = Painter(invocation.shell)

        # The beginning of the prompt string:
        ps1 = ""

        # Warn if we're the superuser:
        if self.root:
            ps1 += paint(A.BOLD, C.RED) + "root" + paint(A.RESET) + " in "

        # Show the path to the current working directory:
        ps1 += paint(A.BOLD, C.CYAN)
        ps1 += paint.escape(self.cwdstr(short=invocation.short_path)) + " "

        # Show the current branch, if any:
        if self.git is not None and self.git.branch is not None:
            ps1 += paint(A.RESET) + "on " + paint(A.BOLD, C.MAGENTA)
            if invocation.unicode:
                ps1 += BRANCH_SYMBOL
            ps1 += paint.escape(self.git.branch) + " "

        # Show how long the previous command took if it wasn't quick:
        if invocation.elapsed >= MIN_ELAPSED:
            ps1 += paint(C.YELLOW) + f"took {humanize(invocation.elapsed)} "

        # The separator, colored by the previous command's exit status:
        ps1 += paint(C.RED if invocation.failed else C.GREEN)
        ps1 += UNICODE_SEPARATOR if invocation.unicode else ASCII_SEPARATOR
        ps1 += paint(A.RESET)

        ps1 += paint.suffix

        return ps1
