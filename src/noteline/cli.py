"""CLI for noteline - parse, export and round-trip annotated outlines."""

import argparse
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.yaml_codec import dump_tree
from .log import init_logger
from .runtime import build_runtime


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Print the annotated tree."""
    root = rt.parse(_read_source(args.file))
    print(dump_tree(root, args.format).rstrip("\n"))
    return 0


def cmd_export(args: argparse.Namespace, rt: Any) -> int:
    """Parse and re-emit canonical outline text."""
    root = rt.parse(_read_source(args.file))
    print(rt.export(root))
    return 0


def cmd_check(args: argparse.Namespace, rt: Any) -> int:
    """Verify that the outline survives parse -> export -> parse."""
    report = rt.round_trip(_read_source(args.file))

    if report.ok:
        if not args.quiet:
            print("✓ Round trip stable")
        return 0

    if not report.counts_equal:
        print("✗ Node count changed", file=sys.stderr)
    if not report.depths_equal:
        print("✗ Depth sequence changed", file=sys.stderr)
    if not report.trees_equal:
        print("✗ Content or notes changed", file=sys.stderr)
    if not args.quiet:
        print("--- exported ---", file=sys.stderr)
        print(report.exported, file=sys.stderr)
    return 1


def _version_string() -> str:
    return (
        f"noteline {__version__} "
        f"(python {platform.python_version()}, platform {sys.platform})"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="noteline", description="Annotated outline parser and exporter"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/noteline.toml, <file dir>/noteline.toml)",
    )
    parser.add_argument("--node", default=None, help="Outline item marker (default: -)")
    parser.add_argument("--note", default=None, help="Inline note separator (default: :)")
    parser.add_argument(
        "--note-block", default=None, help="Detailed note block marker (default: >)"
    )
    parser.add_argument("--escape", default=None, help="Escape character (default: \\)")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # parse command
    parser_parse = subparsers.add_parser("parse", help="Print the annotated tree")
    parser_parse.add_argument("file", help="Outline file, or - for stdin")
    parser_parse.add_argument(
        "--format", choices=["json", "yaml"], default="json",
        help="Output format (default: json)"
    )

    # export command
    parser_export = subparsers.add_parser("export", help="Re-emit canonical outline text")
    parser_export.add_argument("file", help="Outline file, or - for stdin")

    # check command
    parser_check = subparsers.add_parser("check", help="Verify the round trip")
    parser_check.add_argument("file", help="Outline file, or - for stdin")

    args = parser.parse_args()

    init_logger(logging.DEBUG if args.verbose else logging.WARNING)

    handlers = {
        "parse": cmd_parse,
        "export": cmd_export,
        "check": cmd_check,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        search_dir = None if args.file == "-" else Path(args.file).parent
        rt = build_runtime(
            config_path=args.config,
            search_dir=search_dir,
            overrides={
                "node": args.node,
                "note": args.note,
                "note_block": args.note_block,
                "escape": args.escape,
            },
        )
        exit_code = handler(args, rt)
        sys.exit(exit_code)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
