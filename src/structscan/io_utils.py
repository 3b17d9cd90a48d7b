# structscan/io_utils.py
import json
import os
import sys
import tempfile


def stderr(msg):
    sysmsg = msg.rstrip("\n")
    try:
        sys.stderr.write(sysmsg + "\n")
    except OSError:
        pass


def write_text_atomic(p, text):
    d = os.path.dirname(p)
    if d and not os.path.isdir(d):
        os.makedirs(d, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=".structscan_", suffix=".tmp", dir=d if d else None)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except Exception:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


def dump_json(obj, pretty=False, compact=False):
    if pretty and compact:
        raise ValueError("cannot combine pretty and compact")

    if pretty:
        return json.dumps(obj, indent=2, ensure_ascii=False)

    # compact is the default
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def write_json(p, obj, pretty=False, compact=False):
    s = dump_json(obj, pretty=pretty, compact=compact)
    write_text_atomic(p, s + "\n")
