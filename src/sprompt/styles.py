from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Shell(Enum):
    """
    An enumeration of the shells that prompts can be generated for.  Each
    shell's value is its name on the command line.
    """

    ZSH = "zsh"
    BASH = "bash"
    POSIX = "posix"


class Color(Enum):
    """
    An enumeration of the supported foreground colors.  Each color's value
    equals its ANSI color number.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    def sgr(self, bright: bool = False) -> str:
        """
        Return the ANSI SGR parameters for setting the color as the foreground
        color
        """
        return f"3{self.value};1" if bright else f"3{self.value}"


class Attribute(Enum):
    """
    An enumeration of the supported text attributes.  Each attribute's value
    equals its ANSI SGR parameter.
    """

    RESET = 0
    BOLD = 1
    UNDERLINE = 4
    REVERSED = 7

    def sgr(self) -> str:
        return str(self.value)


Token = Union[Color, Attribute]

#: How a control sequence is embedded in each shell's prompt.  zsh needs
#: ``%{ ... %}`` around non-printing sequences so that its line editor can
#: tell where the cursor is; the other targets print the prompt directly.
MARKERS = {
    Shell.ZSH: "%{{{}%}}",
    Shell.BASH: "{}",
    Shell.POSIX: "{}",
}

#: Text to add after the prompt's final separator
PROMPT_SUFFIX = {
    Shell.ZSH: " ",
    Shell.BASH: "",
    Shell.POSIX: "",
}


def _control(params: str, shell: Shell) -> str:
    return MARKERS[shell].format(f"\x1B[{params}m")


#: Every escape sequence, keyed by ``(token, bright, shell)``.  Attributes
#: have no bright variant and are only stored with ``bright=False``.
ESCAPES: dict[tuple[Token, bool, Shell], str] = {
    **{
        (color, bright, shell): _control(color.sgr(bright), shell)
        for color in Color
        for bright in (False, True)
        for shell in Shell
    },
    **{
        (attr, False, shell): _control(attr.sgr(), shell)
        for attr in Attribute
        for shell in Shell
    },
}


def sequence(token: Token, shell: Shell, bright: bool = False) -> str:
    """
    Return the escape sequence for a color or attribute, ready for embedding
    in ``shell``'s prompt.  ``bright`` is ignored for attributes.
    """
    if isinstance(token, Attribute):
        bright = False
    return ESCAPES[token, bright, shell]


@dataclass
class Painter:
    """Produces escape sequences & escaped text for a single target shell"""

    shell: Shell

    def __call__(self, *tokens: Token, bright: bool = False) -> str:
        """
        Return the concatenated escape sequences for ``tokens``, in the order
        given
        """
        return "".join(sequence(t, self.shell, bright) for t in tokens)

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in the
        shell's prompt.  Output substituted into zsh's ``PROMPT`` undergoes
        prompt expansion, so ``%`` must be doubled there.
        """
        if self.shell is Shell.ZSH:
            return s.replace("%", "%%")
        return s

    @property
    def suffix(self) -> str:
        return PROMPT_SUFFIX[self.shell]
