from __future__ import annotations

import os
import sys
import argparse
from typing import List

from textcompare.config import DEFAULT_MAX_CHARS, REPORT_SUFFIX
from textcompare.core.diff_engine import DiffOptions, DiffResult
from textcompare.core.report_writer import ReportWriter
from textcompare.core.session import CompareSession, InputTooLargeError
from textcompare.utils.encoding_detector import read_text_file
from textcompare.utils.logger import logger
from textcompare.utils.prefs import load_prefs

FORMATS = ("text", "html")


def _default_report_filename(old_path: str, new_path: str) -> str:
    import re

    def stem(p: str) -> str:
        if p == "-":
            return "stdin"
        base = os.path.splitext(os.path.basename(p))[0]
        base = re.sub(r"\s+", "_", base)
        base = re.sub(r"[^\w.\-]+", "_", base)
        return base.strip("._-") or "text"

    return f"{stem(old_path)}_vs_{stem(new_path)}{REPORT_SUFFIX}"


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return read_text_file(path)


def _print_text(result: DiffResult, old_label: str, new_label: str, show_stats: bool) -> None:
    rule = "=" * 80
    print(f"{rule}\n--- {old_label}\n{rule}")
    print(result.old_annotated)
    print(f"{rule}\n+++ {new_label}\n{rule}")
    print(result.new_annotated)
    if show_stats:
        _print_stats(result)


def _print_stats(result: DiffResult) -> None:
    s = result.stats
    print(f"matched={s.matched} changed={s.changed} deleted={s.deleted} inserted={s.inserted}",
          file=sys.stderr)


def main(argv: List[str] | None = None) -> int:
    prefs = load_prefs()
    default_format = prefs.get("format")
    if default_format not in FORMATS:
        logger.warning("Ignoring stored format preference %r", default_format)
        default_format = "text"

    p = argparse.ArgumentParser(description="Highlight word, letter and whitespace changes between two texts")
    p.add_argument("old", help="Old version (file path, or - for stdin)")
    p.add_argument("new", help="New version (file path, or - for stdin)")
    p.add_argument("--format", "-f", choices=FORMATS, default=default_format,
                   help="text: marked-up output on stdout; html: write a two-pane report")
    p.add_argument("--out", "-o", help="Report path for --format html (default: <old>_vs_<new>.html)")
    p.add_argument("--no-space-blocks", action="store_true",
                   help="Mark whitespace changes like any other change instead of drawing blocks")
    p.add_argument("--max-chars", type=int, default=DEFAULT_MAX_CHARS,
                   help="Refuse inputs longer than this many characters (0 disables the limit)")
    p.add_argument("--stats", action="store_true", help="Print change counts to stderr")

    args = p.parse_args(argv)
    if args.old == "-" and args.new == "-":
        print("Only one side can be read from stdin.", file=sys.stderr)
        return 2

    for path in (args.old, args.new):
        if path != "-" and not os.path.isfile(path):
            print(f"Input file does not exist: {path}", file=sys.stderr)
            return 2

    old_text = _read_input(args.old)
    new_text = _read_input(args.new)

    highlight_spaces = bool(prefs.get("highlight_spaces", True)) and not args.no_space_blocks
    session = CompareSession(
        DiffOptions(markup=args.format, highlight_spaces=highlight_spaces),
        max_chars=args.max_chars or None,
    )
    session.set_texts(old_text, new_text)
    try:
        result = session.compare()
    except InputTooLargeError as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return 1

    if args.format == "text":
        _print_text(result, args.old, args.new, args.stats)
        return 0

    out_path = args.out or _default_report_filename(args.old, args.new)
    ok = ReportWriter().write(result, out_path, old_label=args.old, new_label=args.new)
    if not ok:
        print("Failed to write report.", file=sys.stderr)
        return 1

    if args.stats:
        _print_stats(result)
    print(os.path.abspath(out_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
