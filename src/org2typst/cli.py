"""Command-line interface for org2typst."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from org2typst.errors import (
    ConvertError,
    DestinationCreateError,
    DestinationWriteError,
    PathResolutionError,
    SourceOpenError,
    SourceReadError,
)
from org2typst.template import DEFAULT_AUTHOR, DEFAULT_BIBLIOGRAPHY

CONFIG_NAME = "org2typst.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    source_file: Path
    dest_file: Path | None
    author: str
    bibliography: str
    watch: bool
    debug: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="org2typst",
        description="Convert an Org document to Typst",
    )
    p.add_argument("source", help="Input .org file")
    p.add_argument("dest", nargs="?", help="Output .typ file (default: stdout)")
    p.add_argument(
        "--author",
        help=f"Author used when #+author is missing (default: {DEFAULT_AUTHOR})",
    )
    p.add_argument(
        "--bibliography",
        metavar="FILE",
        help=f"Bibliography file referenced at the end (default: {DEFAULT_BIBLIOGRAPHY})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and reconvert")
    p.add_argument("--debug", action="store_true", help="Dump scanned nodes to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Print source and output paths")
    return p


def load_config(config_path: Path | None, source_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else source_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    source_file = Path(args.source)
    source_dir = source_file.parent
    if not source_dir.parts:
        source_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, source_dir)

    author = DEFAULT_AUTHOR
    bibliography = DEFAULT_BIBLIOGRAPHY
    cfg_doc = config.get("document")
    if isinstance(cfg_doc, dict):
        if isinstance(cfg_doc.get("author"), str):
            author = cfg_doc["author"]
        if isinstance(cfg_doc.get("bibliography"), str):
            bibliography = cfg_doc["bibliography"]
    if args.author is not None:
        author = args.author
    if args.bibliography is not None:
        bibliography = args.bibliography

    return CliOptions(
        source_file=source_file,
        dest_file=Path(args.dest) if args.dest else None,
        author=author,
        bibliography=bibliography,
        watch=args.watch,
        debug=args.debug,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_source(path: Path) -> tuple[Path, str]:
    """Resolve and read the source file, returning (absolute path, text)."""
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError):
        raise PathResolutionError("Unable to resolve path to org file", path) from None

    try:
        f = open(resolved, encoding="utf-8")
    except OSError:
        raise SourceOpenError("Failed to open org file", resolved) from None

    with f:
        try:
            return resolved, f.read()
        except (OSError, UnicodeDecodeError):
            raise SourceReadError("Unable to read org file", resolved) from None


def write_output(text: str, dest: Path | None) -> None:
    """Write converted text to *dest*, or to stdout when no destination is given."""
    if dest is None:
        print(text)
        return

    try:
        f = open(dest, "w", encoding="utf-8")
    except OSError:
        raise DestinationCreateError("Failed to open output typst file", dest) from None

    # close() may raise a buffered write error
    try:
        with f:
            f.write(text)
    except OSError:
        raise DestinationWriteError("Failed to write to typst file", dest) from None


def print_paths(options: CliOptions, resolved: Path) -> None:
    print(f"Org file path: {resolved}", file=sys.stderr)
    if options.dest_file is not None:
        print(f"Output path: {options.dest_file}", file=sys.stderr)
    else:
        print("Output path: stdout", file=sys.stderr)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def convert_file(options: CliOptions) -> str:
    """Read, scan, check, and render an Org file to Typst."""
    from org2typst.check import check
    from org2typst.debug import dump_document
    from org2typst.render import render
    from org2typst.scanner import scan

    resolved, source = read_source(options.source_file)
    if options.verbose:
        print_paths(options, resolved)

    doc = scan(source)

    if options.debug:
        dump_document(doc)

    for diagnostic in check(doc):
        print(diagnostic.format(source, options.source_file.name), file=sys.stderr)

    return render(doc, author=options.author, bibliography=options.bibliography)


def watch_loop(options: CliOptions) -> None:
    """Poll the source file for changes, reconvert on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.source_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.source_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    write_output(convert_file(options), options.dest_file)
                    print(f"Converted {options.source_file}", file=sys.stderr)
                except ConvertError as exc:
                    print(f"Problem converting file: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        output = convert_file(options)
        write_output(output, options.dest_file)
    except (PathResolutionError, SourceOpenError, DestinationCreateError) as exc:
        print(f"Problem converting file: {exc}", file=sys.stderr)
        return 1
    except (SourceReadError, DestinationWriteError) as exc:
        print(f"Problem converting file: {exc}", file=sys.stderr)
        return 2

    return 0
