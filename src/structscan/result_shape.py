# structscan/result_shape.py


def new_result():
    """
    Initialize a new scan result.

    The dict is owned by one scan invocation and filled in place while the
    walker runs; it is final once the walk returns.
    """
    return {
        "pkg_path": "",
        "pkg_name": "",
        "build_tags": "",     # verbatim constraint expression, never evaluated
        "struct_names": [],   # visit order, duplicates kept
    }


def to_output(result):
    """Project a scan result onto the JSON object the CLI emits."""
    return {
        "pkg_path": result["pkg_path"],
        "pkg_name": result["pkg_name"],
        "build_tags": result["build_tags"],
        "types": list(result["struct_names"]),
    }
