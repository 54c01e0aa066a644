"""
Minimal Git-aware prompt for zsh, Bash & POSIX sh

``sprompt`` renders a single-line shell prompt showing the current directory,
the current Git branch, how long the previous command took (if it took a
while), and whether it succeeded.  It is run afresh for every prompt, so it
keeps to queries that stay fast even in very large repositories.

Features:

- Replaces your home directory with ``~`` and can show just the last few
  components of the current path, starting from the top of the current
  repository
- Shows the current Git branch, even in a repository with no commits yet
- Shows the runtime of the previous command once it reaches two seconds
- Colors the prompt separator by the previous command's exit status
- Warns when running as root
- Supports zsh, Bash, and plain POSIX sh; ``sprompt init`` prints the code to
  add to your shell's startup file
"""

__version__ = "0.1.0"
__license__ = "MIT"
