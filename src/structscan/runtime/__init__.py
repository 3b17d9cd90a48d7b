"""structscan.runtime  -- loads run-time execution data"""

import json
import importlib.resources as res


EVENT_KINDS = {}


def load_runtime_execution_data():
    if not EVENT_KINDS:
        _load_event_kinds()


def _load_event_kinds():
    """
    Load event_kinds.json from the structscan package data.

    The file lives next to this module:
        structscan/runtime/event_kinds.json
    """

    pkg = "structscan.runtime"
    filename = "event_kinds.json"

    try:
        with res.files(pkg).joinpath(filename).open("r", encoding="utf-8") as f:
            EVENT_KINDS.update(json.load(f))
    except FileNotFoundError:
        raise RuntimeError(f"Missing packaged resource: {pkg}/{filename}")
