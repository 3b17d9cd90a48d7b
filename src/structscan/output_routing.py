# structscan/output_routing.py
from .io_utils import dump_json, write_json

STDOUT = "stdout"


def route_output(opt_value):
    # opt_value meanings:
    # - None: option not given -> stdout
    # - "stdout": stdout
    # - "<filename>": file
    if opt_value is None or opt_value == "":
        return STDOUT
    return str(opt_value)


def emit(dest, obj, pretty, compact):
    if dest == STDOUT:
        print(dump_json(obj, pretty=pretty, compact=compact))
        return
    write_json(dest, obj, pretty=pretty, compact=compact)
