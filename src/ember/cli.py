"""Command-line interface for the Ember scanner."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ember.debug import dump_tokens, tokens_to_json
from ember.errors import LexError
from ember.lexer import Scanner
from ember.tokens import Token

FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when the config file holds an invalid value."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    format: str
    fail_fast: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="ember",
        description="Scan Ember source and print its tokens",
    )
    p.add_argument("input", help="Input .em file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token dump format (default: text)",
    )
    p.add_argument(
        "--fail-fast",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Stop at the first lexical error instead of reporting all of them",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover ember.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log scanner activity to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "ember.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc

    fail_fast = False
    cfg_scan = config.get("scan")
    if isinstance(cfg_scan, dict):
        cfg_fail_fast = cfg_scan.get("fail_fast")
        if isinstance(cfg_fail_fast, bool):
            fail_fast = cfg_fail_fast
    if args.fail_fast is not None:
        fail_fast = args.fail_fast

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise ConfigError(f"invalid output format in config: {cfg_format!r}")
            fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        fail_fast=fail_fast,
        verbose=args.verbose,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def render_tokens(tokens: list[Token], fmt: str) -> str:
    """Render tokens in the requested dump format."""
    if fmt == "json":
        return tokens_to_json(tokens)
    buf = io.StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(options.verbose)

    if options.input_file is None:
        filename = "<stdin>"
        source = sys.stdin.read()
    else:
        filename = str(options.input_file)
        try:
            source = options.input_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {filename}: {exc}", file=sys.stderr)
            return 2

    scanner = Scanner(source, filename, fail_fast=options.fail_fast)
    try:
        tokens = scanner.scan_tokens()
    except LexError as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1

    for error in scanner.errors:
        print(error.format(filename), file=sys.stderr)

    output = render_tokens(tokens, options.format)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 1 if scanner.errors else 0
