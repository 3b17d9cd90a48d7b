# structscan/scan_command.py
import os

from . import events
from .errors import UsageError, ParseError, ResolutionError, IoFailure
from .io_utils import stderr
from .output_routing import route_output, emit
from .result_shape import to_output
from .scan import scan


def run_scan_command(args):
    try:
        _run_scan_command(args)
    except UsageError as e:
        _fail("usage-error", e)
    except ParseError as e:
        _fail("parse-error", e)
    except ResolutionError as e:
        _fail("resolution-error", e)
    except (IoFailure, OSError) as e:
        _fail("io-error", e)
    except Exception as e:
        _fail("internal-error", e)

    if args.verbose:
        for line in events.generate_events_presentation_lines():
            stderr(line)

    return events.calculate_errcode()


def _fail(kind, e):
    evt = events.append_event(kind, {"error": str(e)})
    stderr(f"structscan: {evt['msg']}")


def _run_scan_command(args):
    if args.pretty and args.compact:
        raise UsageError("cannot combine --pretty and --compact")

    root = str(args.path)
    if not os.path.exists(root):
        raise IoFailure(f"no such file or directory: {root}")

    dest = route_output(args.output)

    result = scan(root, os.path.isdir(root), all_structs=bool(args.all))

    emit(dest, to_output(result), pretty=bool(args.pretty), compact=not args.pretty)
