from __future__ import annotations
import shutil
import subprocess
import pytest
from sprompt.hooks import init_script
from sprompt.styles import Shell


def test_zsh_init() -> None:
    assert init_script(Shell.ZSH) == (
        "_sprompt_preexec() {\n"
        "    _sprompt_preexec_ran=true\n"
        '    _sprompt_last_seconds="$SECONDS"\n'
        "}\n"
        "_sprompt_precmd() {\n"
        '    if [ "${_sprompt_preexec_ran:-false}" = false ]; then\n'
        '        _sprompt_last_seconds="$SECONDS"\n'
        "    fi\n"
        "    _sprompt_preexec_ran=false\n"
        "}\n"
        "autoload -Uz add-zsh-hook\n"
        "add-zsh-hook preexec _sprompt_preexec\n"
        "add-zsh-hook precmd _sprompt_precmd\n"
        "setopt PROMPT_SUBST\n"
        "PROMPT='$(sprompt prompt -e \"$?\" -s zsh --elapsed-seconds"
        " \"$(( SECONDS - _sprompt_last_seconds ))\")'"
    )


def test_zsh_init_flags() -> None:
    script = init_script(Shell.ZSH, unicode=True, short_path=True)
    assert script.endswith(
        "--elapsed-seconds \"$(( SECONDS - _sprompt_last_seconds ))\" -u -p)'"
    )


@pytest.mark.parametrize(
    "unicode,short_path,args",
    [
        (False, False, ""),
        (True, False, " -u"),
        (False, True, " -p"),
        (True, True, " -u -p"),
    ],
)
def test_bash_init(unicode: bool, short_path: bool, args: str) -> None:
    script = init_script(Shell.BASH, unicode=unicode, short_path=short_path)
    assert "trap _sprompt_beforecmd DEBUG\n" in script
    assert (
        '    sprompt prompt -e "$status" -s bash --elapsed-seconds "$elapsed"'
        + args
        + "\n}\n"
    ) in script
    assert script.endswith("PS1=' '\nPROMPT_COMMAND=_sprompt_aftercmd")
    # Runtime on the first prompt is zero:
    assert '    local elapsed=0\n    if [ "${_sprompt_first_prompt:-true}" = true ]' in script


def test_posix_init() -> None:
    assert init_script(Shell.POSIX, short_path=True) == (
        "PS1='$(sprompt prompt -e \"$?\" -s posix --elapsed-seconds 0 -p) '"
    )


@pytest.mark.parametrize("shell", list(Shell))
def test_init_keeps_shell_expansions(shell: Shell) -> None:
    script = init_script(shell, unicode=True)
    assert '-e "$?"' in script
    assert "@" not in script
    assert script == script.strip()


# Loads the hook with `sprompt` replaced by a function that echoes its
# arguments, then fires the trap & prompt functions in the order Bash would.
# With SECONDS unset it is an ordinary variable, so the clock is set by hand.
BASH_DRIVER = r"""
sprompt() { echo "$*"; }
eval "$1"
trap - DEBUG
unset SECONDS _sprompt_last_seconds
_sprompt_beforecmd_ran=false

# First prompt of the session:
SECONDS=50
_sprompt_beforecmd
_sprompt_aftercmd

# A command line with two simple commands that runs for 5 seconds:
SECONDS=100
_sprompt_beforecmd
SECONDS=101
_sprompt_beforecmd
SECONDS=105
_sprompt_beforecmd
(exit 3)
_sprompt_aftercmd

# An empty command line:
SECONDS=200
_sprompt_beforecmd
_sprompt_aftercmd
"""


@pytest.mark.skipif(shutil.which("bash") is None, reason="Bash not installed")
def test_bash_init_timing() -> None:
    r = subprocess.run(
        ["bash", "--norc", "-c", BASH_DRIVER, "bash", init_script(Shell.BASH)],
        stdout=subprocess.PIPE,
        check=True,
        text=True,
    )
    assert r.stdout.splitlines() == [
        "prompt -e 0 -s bash --elapsed-seconds 0",
        "prompt -e 3 -s bash --elapsed-seconds 5",
        "prompt -e 0 -s bash --elapsed-seconds 0",
    ]
