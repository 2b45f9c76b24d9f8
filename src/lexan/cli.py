"""Command-line interface for lexan."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lexan.errors import LexError

FORMATS = ("text", "html", "json")


class ConfigError(Exception):
    """Raised when a config file holds a value of the wrong type or range."""


class InputError(Exception):
    """Raised when the input cannot be read or decoded."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    format: str
    newlines: bool
    eof: bool
    watch: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lexan",
        description="Lexical analyzer for a small C/JS-like language",
    )
    p.add_argument("input", help="Input source file ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--no-newlines",
        dest="newlines",
        action="store_false",
        default=None,
        help="Omit NEWLINE tokens from the output",
    )
    p.add_argument(
        "--eof",
        action="store_true",
        default=None,
        help="Append an EOF token to the output",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover lexan.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-run")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "lexan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc

    fmt = "text"
    newlines = True
    eof = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise ConfigError(
                    f"invalid output.format {cfg_format!r} (expected one of {', '.join(FORMATS)})"
                )
            fmt = cfg_format
        cfg_newlines = cfg_output.get("newlines")
        if isinstance(cfg_newlines, bool):
            newlines = cfg_newlines
        cfg_eof = cfg_output.get("eof")
        if isinstance(cfg_eof, bool):
            eof = cfg_eof

    if args.format is not None:
        fmt = args.format
    if args.newlines is not None:
        newlines = args.newlines
    if args.eof is not None:
        eof = args.eof

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        newlines=newlines,
        eof=eof,
        watch=args.watch,
    )


def read_source(options: CliOptions) -> str:
    """Read the input text, dropping a leading UTF-8 byte-order mark."""
    name = _display_name(options)
    try:
        if options.input_file is None:
            return sys.stdin.read()
        return options.input_file.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise InputError(f"cannot read {name}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"cannot read {name}: invalid UTF-8 at byte {exc.start}") from exc


def analyze_source(source: str, options: CliOptions) -> str:
    """Tokenize source and render it in the selected format."""
    from lexan.lexer import tokenize
    from lexan.render import RENDERERS
    from lexan.tokens import TokenKind

    tokens = tokenize(source, emit_eof=options.eof)
    if not options.newlines:
        tokens = [t for t in tokens if t.kind is not TokenKind.NEWLINE]
    return RENDERERS[options.format](tokens)


def analyze_file(options: CliOptions) -> str:
    """Read the input and return the rendered token table."""
    return analyze_source(read_source(options), options)


def _display_name(options: CliOptions) -> str:
    return str(options.input_file) if options.input_file is not None else "<stdin>"


def _write(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-analyze on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write(options, analyze_file(options))
                    print(f"Analyzed {options.input_file}", file=sys.stderr)
                except LexError as exc:
                    print(exc.format(_display_name(options)), file=sys.stderr)
                except InputError as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        if options.input_file is None:
            print("error: --watch needs an input file, not stdin", file=sys.stderr)
            return 2
        watch_loop(options)
        return 0

    try:
        source = read_source(options)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = analyze_source(source, options)
    except LexError as exc:
        print(exc.format(_display_name(options)), file=sys.stderr)
        return 1

    _write(options, output)
    return 0
