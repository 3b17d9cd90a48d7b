# structscan/pkgpath.py
"""
structscan.pkgpath  -- filesystem path -> Go import path

Module mode looks for the nearest go.mod above the path and reads its module
directive. GOPATH mode maps <gopath>/src/<import path> back to the import
path. GO111MODULE=off forces GOPATH mode.
"""
import os
import posixpath
import re

from .errors import ResolutionError

GO_MOD = "go.mod"

MODULE_RE = re.compile(r"""^\s*module\s+(?:"((?:[^"\\]|\\.)*)"|`([^`]*)`|(\S+))""")


def get_pkg_path(path, is_dir):
    path = abspath(path)
    gopath = default_gopath()

    if os.environ.get("GO111MODULE", "") == "off":
        return pkg_path_from_gopath(path, is_dir, gopath)

    go_mod = find_go_mod(path if is_dir else dirname(path))
    if go_mod is not None:
        return pkg_path_from_go_mod(path, is_dir, go_mod)

    return pkg_path_from_gopath(path, is_dir, gopath)


def default_gopath():
    gopath = os.environ.get("GOPATH", "")
    if gopath:
        return gopath
    return join(os.path.expanduser("~"), "go")


def find_go_mod(directory):
    d = directory
    while True:
        candidate = join(d, GO_MOD)
        if is_file(candidate):
            return candidate
        parent = dirname(d)
        if parent == d:
            return None
        d = parent


def read_module_path(go_mod):
    try:
        with open(go_mod, "r", encoding="utf-8") as f:
            for line in f:
                m = MODULE_RE.match(line)
                if m:
                    quoted, raw, bare = m.groups()
                    if quoted is not None:
                        return re.sub(r"\\(.)", r"\1", quoted)
                    if raw is not None:
                        return raw
                    return bare
    except OSError as e:
        raise ResolutionError(f"cannot read {go_mod}: {e}")
    return ""


def pkg_path_from_go_mod(path, is_dir, go_mod):
    module = read_module_path(go_mod)
    if not module:
        raise ResolutionError(f"cannot determine module path from {go_mod}")

    rel = to_slash(relpath(path, dirname(go_mod)))
    if rel == ".":
        rel = ""

    pkg = posixpath.join(module, rel) if rel else module
    if not is_dir:
        return posixpath.dirname(pkg)
    return posixpath.normpath(pkg)


def pkg_path_from_gopath(path, is_dir, gopath):
    for root in gopath.split(os.pathsep):
        if not root:
            continue
        prefix = join(abspath(root), "src")
        rel = relpath(path, prefix)
        if rel == os.pardir or rel.startswith(os.pardir + os.sep) or os.path.isabs(rel):
            continue
        pkg = to_slash(rel)
        if not is_dir:
            return posixpath.dirname(pkg) or "."
        return posixpath.normpath(pkg)

    raise ResolutionError(f"file '{path}' is not in GOPATH '{gopath}'")


# ------------------------------------------------------------
# Path helpers
# ------------------------------------------------------------

def is_file(p):
    return os.path.isfile(p)


def abspath(p):
    return os.path.abspath(p)


def dirname(p):
    return os.path.dirname(p)


def join(a, b):
    return os.path.join(a, b)


def relpath(p, base):
    try:
        return os.path.relpath(p, base)
    except ValueError:
        # different drives on Windows
        return p


def to_slash(p):
    return p.replace(os.sep, "/")
