"""CLI entry point and argument parsing."""
from __future__ import annotations

import argparse
import sys
import traceback

from tagbox.demo import DEFAULT_TUPLE_NAME, run_demo
from tagbox.internals import errors as er
from tagbox.internals.report import Reporter
from tagbox.internals.version import print_banner

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INPUT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tagbox",
        description="Print tagged values through a fixed tuple and a growable list",
    )
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    ap.add_argument("--values", metavar="LITERAL",
                    help="Values to store instead of the built-in ones, e.g. \"42, 3.14, 'A', null\"")
    ap.add_argument("--name", default=DEFAULT_TUPLE_NAME,
                    help=f"Tuple name (default: {DEFAULT_TUPLE_NAME})")
    ap.add_argument("--show-capacity", action="store_true",
                    help="Report the list's final length and capacity on stderr")
    ap.add_argument("--dump-parse", action="store_true", help="Print raw Lark tree of --values")
    ap.add_argument("--no-color", action="store_true", help="Disable colored diagnostics")
    ap.add_argument(
        "--traceback",
        action="store_true",
        help="Print full traceback on runtime errors (for debugging)",
    )
    return ap


def _read_values(args: argparse.Namespace):
    """Parse --values. Returns (values, exit_code); values is None on error."""
    from tagbox.internals.parser import parse_values

    reporter = Reporter(source=args.values)
    use_color = False if args.no_color else None
    try:
        parsed = parse_values(args.values, dump_parse=args.dump_parse)
    except er.TagboxError as exc:
        er.emit_exception(reporter, exc)
        reporter.print(use_color=use_color)
        return None, EXIT_INPUT_ERROR

    for index, (value, span) in enumerate(zip(parsed.values, parsed.spans)):
        if value is None:
            er.emit(reporter, er.ERR.CW2011, span, index=index)
    reporter.print(use_color=use_color)
    return parsed.values, EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run the tuple/list demo. Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.version:
        print_banner()
        return EXIT_OK

    values = None
    if args.values is not None:
        values, code = _read_values(args)
        if code != EXIT_OK:
            return code

    try:
        result = run_demo(values, name=args.name)
    except MemoryError:
        # Allocation outside a named site, e.g. a container frame
        exc = er.AllocationFailure("interpreter")
        if args.traceback:
            traceback.print_exc()
        print(er.format_runtime_error(exc), file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except er.TagboxError as exc:
        if args.traceback:
            traceback.print_exc()
        print(er.format_runtime_error(exc), file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.show_capacity:
        print(f"length={result.list_length} capacity={result.list_capacity}", file=sys.stderr)
    return EXIT_OK
