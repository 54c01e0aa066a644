from __future__ import annotations
from string import Template
from .styles import Shell


class ScriptTemplate(Template):
    """
    A template for shell code.  Placeholders are written ``@name`` so that
    every ``$`` in the template is passed through to the shell untouched.
    """

    delimiter = "@"


# Runs on every prompt.  preexec() only fires when a command is actually
# executed, so if precmd() finds that it didn't (the first prompt, or an empty
# command line), the previous command's runtime is taken to be zero.
ZSH_INIT = ScriptTemplate(
    r"""
_sprompt_preexec() {
    _sprompt_preexec_ran=true
    _sprompt_last_seconds="$SECONDS"
}
_sprompt_precmd() {
    if [ "${_sprompt_preexec_ran:-false}" = false ]; then
        _sprompt_last_seconds="$SECONDS"
    fi
    _sprompt_preexec_ran=false
}
autoload -Uz add-zsh-hook
add-zsh-hook preexec _sprompt_preexec
add-zsh-hook precmd _sprompt_precmd
setopt PROMPT_SUBST
PROMPT='$(sprompt prompt -e "$?" -s zsh --elapsed-seconds "$(( SECONDS - _sprompt_last_seconds ))"@args)'
"""
)

# The DEBUG trap fires before every simple command, including the one run by
# PROMPT_COMMAND, so only its first firing after a prompt is recorded.
BASH_INIT = ScriptTemplate(
    r"""
_sprompt_beforecmd() {
    [ "${_sprompt_beforecmd_ran:-false}" = true ] && return
    _sprompt_beforecmd_ran=true
    _sprompt_last_seconds="$SECONDS"
}
trap _sprompt_beforecmd DEBUG

_sprompt_aftercmd() {
    local status="$?"
    local elapsed=0
    if [ "${_sprompt_first_prompt:-true}" = true ]; then
        _sprompt_first_prompt=false
    else
        elapsed="$(( SECONDS - ${_sprompt_last_seconds:-$SECONDS} ))"
    fi
    _sprompt_beforecmd_ran=false
    sprompt prompt -e "$status" -s bash --elapsed-seconds "$elapsed"@args
}
# If PS1 is completely empty, pressing the <enter> key doesn't work.
PS1=' '
PROMPT_COMMAND=_sprompt_aftercmd
"""
)

# Plain POSIX sh has no way to time commands.
POSIX_INIT = ScriptTemplate(
    r"""
PS1='$(sprompt prompt -e "$?" -s posix --elapsed-seconds 0@args) '
"""
)

TEMPLATES = {
    Shell.ZSH: ZSH_INIT,
    Shell.BASH: BASH_INIT,
    Shell.POSIX: POSIX_INIT,
}


def init_script(shell: Shell, unicode: bool = False, short_path: bool = False) -> str:
    """
    Return the shell code that, when evaluated by ``shell`` at startup, makes
    it display the prompt produced by ``sprompt prompt`` with the given
    options
    """
    args = ""
    if unicode:
        args += " -u"
    if short_path:
        args += " -p"
    return TEMPLATES[shell].substitute(args=args).strip()
