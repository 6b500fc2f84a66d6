"""Command-line interface for sanitize-filename."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .commands.input import STDIN_MARKER
from .errors import InputReadError, exit_code_for_exception

VERSION = "0.1.0"

_VALUE_OPTIONS = {"-r": "--replace", "--replace": "--replace", "--config": "--config"}
_SWITCHES = frozenset(
    {
        "-h",
        "--help",
        "--version",
        "--truncate",
        "--no-truncate",
        "--windows",
        "--no-windows",
        "--check",
        "--json",
        "-v",
        "--verbose",
    }
)


def _load_dotenv_files() -> None:
    """Load ``.env`` from the working directory without overriding the environment."""
    env_path = Path.cwd() / ".env"
    if env_path.is_file():
        load_dotenv(env_path, override=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanitize-filename",
        description="Turn arbitrary text into a safe filesystem name component",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sanitize-filename {VERSION}",
    )
    parser.add_argument(
        "name",
        nargs="?",
        help=(
            "Name to sanitize; any argument that is not a known flag, even one "
            "starting with '-' (default: read all of stdin; '-' also means stdin)"
        ),
    )
    parser.add_argument(
        "-r",
        "--replace",
        dest="replacement",
        metavar="TEXT",
        help="Text substituted for offending characters and reserved names (taken verbatim)",
    )
    parser.add_argument(
        "--truncate",
        dest="truncate",
        action="store_const",
        const=True,
        help="Cap the result at 255 UTF-8 bytes (default)",
    )
    parser.add_argument(
        "--no-truncate",
        dest="truncate",
        action="store_const",
        const=False,
        help="Do not cap the result length",
    )
    parser.add_argument(
        "--windows",
        dest="windows",
        action="store_const",
        const=True,
        help="Apply Windows device-name and trailing dot/space rules",
    )
    parser.add_argument(
        "--no-windows",
        dest="windows",
        action="store_const",
        const=False,
        help="Skip Windows-specific rules",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the input is already sanitized (exit 1 if not)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings path (default: ~/.config/sanitize-filename/settings.json)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], Optional[str]]:
    """Separate flags from the name, the way the flags are documented.

    Any token that is not a known flag is the name, even when it starts with
    ``-``; the last one wins and ``-`` resets it to stdin. The token after
    ``-r``/``--replace``/``--config`` is always taken as its value.

    Returns:
        Flag tokens for argparse (values attached with ``=``) and the name,
        or None to read stdin
    """
    flags: list[str] = []
    name: Optional[str] = None
    tokens = iter(argv)
    for token in tokens:
        if token in _VALUE_OPTIONS:
            value = next(tokens, None)
            if value is None:
                # Left bare so argparse reports the missing value.
                flags.append(token)
            else:
                flags.append(f"{_VALUE_OPTIONS[token]}={value}")
        elif token in _SWITCHES or token.startswith(("--replace=", "--config=")):
            flags.append(token)
        elif token == STDIN_MARKER:
            name = None
        else:
            name = token
    return flags, name


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    flags, name = split_argv(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(flags)
    args.name = name
    _configure_logging(args.verbose)

    try:
        from .settings import default_config_path, load_settings, resolve_options

        _load_dotenv_files()
        if args.config is not None and not args.config.is_file():
            raise InputReadError("settings file", path=args.config)
        config_path = args.config if args.config is not None else default_config_path()
        settings = load_settings(config_path)
        options = resolve_options(
            settings,
            cli_windows=args.windows,
            cli_truncate=args.truncate,
            cli_replacement=args.replacement,
        )
        if args.check:
            from .commands.check import run_check

            return run_check(args, options=options.for_check())
        from .commands.sanitize import run_sanitize

        return run_sanitize(args, options=options)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())
