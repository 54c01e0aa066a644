from __future__ import annotations
import argparse
import logging
import os
import sys
from . import __version__
from .git import BACKENDS, DEFAULT_BACKEND
from .hooks import init_script
from .info import PromptInfo, PromptInvocation
from .styles import Shell


#: Values of $SPROMPT_DEBUG that turn on debug logging
TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    return os.environ.get("SPROMPT_DEBUG", "").strip().lower() in TRUTHY


def elapsed_seconds(s: str) -> int:
    if not (s.isascii() and s.isdigit()):
        raise argparse.ArgumentTypeError(
            f"must be a non-negative integer number of seconds: {s!r}"
        )
    return int(s)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprompt",
        description="Minimal Git-aware prompt for zsh, Bash & POSIX sh",
    )
    parser.add_argument(
        "--git-backend",
        choices=list(BACKENDS.keys()),
        default=os.environ.get("SPROMPT_GIT_BACKEND") or DEFAULT_BACKEND,
        help=(
            "How to query Git repositories"
            f"  [default: $SPROMPT_GIT_BACKEND or {DEFAULT_BACKEND}]"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=debug_enabled(),
        help="Log debugging information to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(
        title="commands", dest="command", required=True
    )

    prompt = subparsers.add_parser("prompt", help="Output the prompt string")
    prompt.add_argument(
        "-e",
        "--exit-code",
        type=int,
        required=True,
        help="Exit status of the last command",
    )
    add_shell_argument(prompt, "The shell where the prompt will be shown")
    prompt.add_argument(
        "--elapsed-seconds",
        type=elapsed_seconds,
        required=True,
        metavar="SECONDS",
        help="Runtime of the last command in seconds",
    )
    add_display_arguments(prompt)

    init = subparsers.add_parser(
        "init", help="Output code to be evaluated by the shell to set up the prompt"
    )
    add_shell_argument(init, "The shell for which to output the setup code")
    add_display_arguments(init)

    return parser


def add_shell_argument(parser: argparse.ArgumentParser, help: str) -> None:
    parser.add_argument(
        "-s",
        "--shell",
        type=Shell,
        choices=list(Shell),
        metavar="{" + ",".join(s.value for s in Shell) + "}",
        required=True,
        help=help,
    )


def add_display_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-u", "--unicode", action="store_true", help="Use Unicode symbols"
    )
    parser.add_argument(
        "-p",
        "--short-path",
        action="store_true",
        help="Show the current directory in shortened form",
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            format="[sprompt] %(levelname)s %(message)s",
            level=logging.DEBUG,
            stream=sys.stderr,
        )
    if args.command == "prompt":
        invocation = PromptInvocation(
            failed=args.exit_code != 0,
            elapsed=args.elapsed_seconds,
            unicode=args.unicode,
            short_path=args.short_path,
            shell=args.shell,
        )
        info = PromptInfo.get(backend=args.git_backend)
        print(info.display(invocation), end="")
    else:
        print(init_script(args.shell, unicode=args.unicode, short_path=args.short_path))


if __name__ == "__main__":
    main()
