# structscan/scan.py
from . import events
from . import gotree
from . import walker
from .discovery import filter_source_file
from .pkgpath import get_pkg_path
from .result_shape import new_result


def scan(path, is_dir, all_structs=False):
    """
    Discover the types of one Go file or package directory.

    Resolves the import path first, then parses the file (or every source
    file of the directory), then walks the parsed nodes into a fresh result.
    Raises ResolutionError or ParseError; there is no partial result.
    """
    path = str(path)
    events.append_event("scan-started", {"path": path, "mode": "dir" if is_dir else "file"})

    result = new_result()
    result["pkg_path"] = get_pkg_path(path, is_dir)
    events.append_event("pkg-path-resolved", {"pkg_path": result["pkg_path"]})

    if is_dir:
        roots = gotree.parse_dir(path, filter_source_file, on_excluded=_note_excluded)
        for pkg in roots:
            for unit in pkg["files"]:
                _note_parsed(unit)
    else:
        unit = gotree.parse_file(path)
        _note_parsed(unit)
        roots = [unit]

    ctx = walker.new_context(result, all_structs)
    for node in roots:
        walker.walk(node, ctx)

    if result["build_tags"]:
        events.append_event("build-tags-found", {"build_tags": result["build_tags"]})

    if not result["struct_names"]:
        events.append_event("no-types-selected", {"path": path})

    events.append_event("scan-finished", {"count": len(result["struct_names"]),
                                          "pkg_path": result["pkg_path"]})
    return result


def _note_excluded(p):
    events.append_event("file-excluded", {"path": str(p)})


def _note_parsed(unit):
    events.append_event("file-parsed", {"path": unit["path"],
                                        "package": unit["package"],
                                        "decls": len(unit["decls"])})
