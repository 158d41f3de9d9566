# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the monkeylang command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from monkeylang.cli.config import ConfigError, DriverConfig, find_config, load_config
from monkeylang.parser.lexer import Lexer
from monkeylang.parser.parser import Parser

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the monkeylang CLI."""
    parser = argparse.ArgumentParser(
        prog="monkeylang",
        description="monkeylang - lexer and parser for the Monkey language",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a configuration file (default: ./.monkeylang.yaml if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of a source file",
        description="Scan a source file and print one token per line.",
    )
    tokens_parser.add_argument(
        "file",
        help="Source file to scan ('-' reads standard input)",
    )

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a source file and print the syntax tree",
        description="Parse a source file, print the program and report diagnostics.",
    )
    parse_parser.add_argument(
        "file",
        help="Source file to parse ('-' reads standard input)",
    )
    parse_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    parse_parser.add_argument(
        "--no-fail",
        action="store_true",
        help="Exit with status 0 even if diagnostics were reported",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        _print_error(str(exc))
        return 1

    if args.command == "tokens":
        return _cmd_tokens(args)
    if args.command == "parse":
        return _cmd_parse(args, config)
    return 0


def _load_config(args: argparse.Namespace) -> DriverConfig:
    if args.config is not None:
        return load_config(args.config)
    return find_config(Path.cwd())


def _read_source(name: str) -> str:
    """Read program text from a file, or from standard input for '-'."""
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _print_error(message: str) -> None:
    print(chalk.red(f"Error: {message}"), file=sys.stderr)


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        _print_error(f"cannot read '{args.file}': {exc}")
        return 1

    for token in Lexer(source):
        print(f"{token.line}:{token.column} {token.type.name} {token.literal}".rstrip())
    return 0


def _cmd_parse(args: argparse.Namespace, config: DriverConfig) -> int:
    """Handle the parse subcommand."""
    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        _print_error(f"cannot read '{args.file}': {exc}")
        return 1

    parser = Parser.from_source(source)
    program = parser.parse_program()

    output_format = args.format or config.output_format
    if output_format == "json":
        print(program.model_dump_json(indent=2))
    else:
        for statement in program.statements:
            print(statement)

    for diagnostic in parser.errors:
        _print_error(diagnostic)

    fail_on_diagnostics = config.fail_on_diagnostics and not args.no_fail
    if parser.errors and fail_on_diagnostics:
        return 1
    return 0
