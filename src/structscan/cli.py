# structscan/cli.py
import argparse
import pathlib

from . import __version__
from . import state
from .scan_command import run_scan_command
from .state import g


def parse(argv=None):
    g["parser"] = p = argparse.ArgumentParser(prog="structscan", add_help=True)
    p.add_argument("--version", action="store_true", help="Print structscan version and exit.")

    sub = p.add_subparsers(dest="command")

    # ------------------------------------------------------------
    # scan
    # ------------------------------------------------------------
    p_scan = sub.add_parser("scan", help="Select the Go types that need generated JSON code.")
    p_scan.add_argument("path", help="Go source file or package directory.", type=pathlib.Path)
    p_scan.add_argument("--all", action="store_true", help="Select every struct type not marked to be skipped.")
    p_scan.add_argument("--output", default=None, help="Write the result to this file ('stdout' by default).")
    p_scan.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    p_scan.add_argument("--compact", action="store_true", help="Minified JSON output.")
    p_scan.add_argument("--verbose", action="store_true", help="Print scan events to stderr.")

    args = p.parse_args(argv)
    return args


def main(argv=None):
    state.reset()
    args = parse(argv)

    if args.version:
        print(f"structscan {__version__}")
        return 0

    if args.command == "scan":
        return run_scan_command(args)

    g["parser"].print_help()
    return 1
