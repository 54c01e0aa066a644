from __future__ import annotations
import pytest
from sprompt.styles import ESCAPES, Attribute, Color, Painter, Shell, sequence


def test_escapes_complete() -> None:
    assert len(ESCAPES) == len(Color) * 2 * len(Shell) + len(Attribute) * len(Shell)


@pytest.mark.parametrize(
    "token,bright,shell,seq",
    [
        (Color.BLACK, False, Shell.BASH, "\x1B[30m"),
        (Color.RED, True, Shell.BASH, "\x1B[31;1m"),
        (Color.WHITE, True, Shell.POSIX, "\x1B[37;1m"),
        (Color.CYAN, False, Shell.ZSH, "%{\x1B[36m%}"),
        (Color.MAGENTA, True, Shell.ZSH, "%{\x1B[35;1m%}"),
        (Attribute.RESET, False, Shell.BASH, "\x1B[0m"),
        (Attribute.BOLD, False, Shell.ZSH, "%{\x1B[1m%}"),
        (Attribute.UNDERLINE, False, Shell.POSIX, "\x1B[4m"),
        (Attribute.REVERSED, True, Shell.ZSH, "%{\x1B[7m%}"),
    ],
)
def test_sequence(
    token: Color | Attribute, bright: bool, shell: Shell, seq: str
) -> None:
    assert sequence(token, shell, bright=bright) == seq


@pytest.mark.parametrize("color", list(Color))
def test_zsh_wraps_bash(color: Color) -> None:
    for bright in (False, True):
        bare = sequence(color, Shell.BASH, bright)
        assert sequence(color, Shell.POSIX, bright) == bare
        assert sequence(color, Shell.ZSH, bright) == f"%{{{bare}%}}"


def test_painter() -> None:
    paint = Painter(Shell.BASH)
    assert paint(Attribute.BOLD, Color.RED) == "\x1B[1m\x1B[31m"
    assert paint(Color.GREEN, bright=True) == "\x1B[32;1m"
    assert paint() == ""


@pytest.mark.parametrize(
    "shell,escaped,suffix",
    [
        (Shell.ZSH, "100%% done", " "),
        (Shell.BASH, "100% done", ""),
        (Shell.POSIX, "100% done", ""),
    ],
)
def test_painter_escape(shell: Shell, escaped: str, suffix: str) -> None:
    paint = Painter(shell)
    assert paint.escape("100% done") == escaped
    assert paint.suffix == suffix
