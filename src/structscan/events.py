"""
structscan.events  -- structured execution events

All user-facing messages and significant processing outcomes are modeled
as events emitted from a controlled vocabulary (event_kinds.json).

event_kinds.json:
  structscan/runtime/event_kinds.json (package structscan.runtime)
"""

import re

from . import state, runtime


# ============================================================
# TOKEN RESOLUTION
# ============================================================

TOKEN_RE = re.compile(r"\{ctx:([a-zA-Z_][a-zA-Z0-9_]*)\}")  # {ctx:key}


def _resolve_tokens(s, context):
    if not s:
        return s

    out = []
    pos = 0

    for m in TOKEN_RE.finditer(s):
        start, end = m.span()

        # literal text before token
        if start > pos:
            out.append(s[pos:start])

        val = context.get(m.group(1)) if context else None
        out.append("" if val is None else str(val))

        pos = end

    # trailing literal text
    if pos < len(s):
        out.append(s[pos:])

    return "".join(out)


def _resolve_data(obj, context):
    """
    Walk data-template and resolve tokens in strings.
    """

    if isinstance(obj, str):
        return _resolve_tokens(obj, context)

    if isinstance(obj, list):
        return [_resolve_data(x, context) for x in obj]

    if isinstance(obj, dict):
        return {k: _resolve_data(v, context) for k, v in obj.items()}

    return obj


# ============================================================
# EVENT EMISSION
# ============================================================

def append_event(kind, context=None):
    """
    Emit event of given kind using catalog definition.
    """

    if context is None:
        context = {}

    runtime.load_runtime_execution_data()

    if kind not in runtime.EVENT_KINDS:
        raise KeyError(f"Unknown event kind: {kind}")

    spec = runtime.EVENT_KINDS[kind]

    evt = {
        "level": spec["level"],
        "kind": kind,
        "tags": list(spec["tags"]),
        "err": spec["err"],
        "msg": _resolve_tokens(spec["msg-template"], context),
        "data": _resolve_data(spec["data-template"], context),
    }

    state.events.append(evt)
    return evt


# ============================================================
# PROGRAM ERROR CODE CALCULATION
# ============================================================

def calculate_errcode():
    """
    Compute exit code from recorded events.

    Exit codes (contract):
      0 = Success
      1 = Usage or argument error
      2 = Go source parse error
      3 = Package path resolution error
      4 = Filesystem or IO error
      5 = Internal error (crash / unhandled exception)
    """

    errs = set()
    for e in state.events:
        if e["level"] == "error":
            errs.add(e["err"])

    if "internal" in errs:
        return 5
    if "usage" in errs:
        return 1
    if "parse" in errs:
        return 2
    if "resolution" in errs:
        return 3
    if "io" in errs:
        return 4
    if errs:
        return 5

    return 0


# ============================================================
# SUMMARY PRESENTATION
# ============================================================

def generate_events_presentation_lines(min_level="info"):
    """
    Generate human-readable summary lines from recorded events.

    Returns:
        list[str]
    """

    ranks = {"info": 0, "warning": 1, "error": 2}
    floor = ranks.get(min_level, 0)

    lines_out = []

    for e in state.events:
        if ranks.get(e["level"], 2) < floor:
            continue

        if e["level"] == "info":
            pfx = "[info]"
        elif e["level"] == "warning":
            pfx = "[warn]"
        elif e["level"] == "error":
            pfx = "[err]"
        else:
            pfx = "[?]"

        msg = e.get("msg") or ""
        lines = msg.splitlines()

        indent = " " * (len(pfx) + 1)

        for i, line in enumerate(lines):
            if i == 0:
                lines_out.append(f"{pfx} {line}")
            else:
                lines_out.append(f"{indent}{line}")

    return lines_out
