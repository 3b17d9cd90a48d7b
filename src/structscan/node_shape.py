# structscan/node_shape.py
"""
structscan.node_shape  -- the node dicts the walker consumes

gotree builds these from a tree-sitter parse; tests can build them by hand.
Every node carries a "kind" tag from the vocabulary below.
"""

PACKAGE = "package"
FILE = "file"
DECL_GROUP = "decl-group"
TYPE_SPEC = "type-spec"
STRUCT_BODY = "struct-body"
OTHER = "other"


def new_package(name):
    return {
        "kind": PACKAGE,
        "name": name,
        "files": [],
    }


def new_file(path, package, package_row=0, leading=None, decls=None):
    return {
        "kind": FILE,
        "path": path,
        "package": package,
        "package_row": package_row,
        "leading": list(leading or []),   # raw comment texts before `package`
        "decls": list(decls or []),
    }


def new_decl_group(doc=None, specs=None, parenthesized=False, row=0):
    # doc is a list of raw comment texts, or None when there is no doc group.
    return {
        "kind": DECL_GROUP,
        "doc": doc,
        "specs": list(specs or []),
        "parenthesized": parenthesized,
        "row": row,
    }


def new_type_spec(name, body, doc=None, alias=False, row=0):
    return {
        "kind": TYPE_SPEC,
        "name": name,
        "doc": doc,
        "alias": alias,
        "body": body,
        "row": row,
    }


def new_struct_body(row=0):
    return {
        "kind": STRUCT_BODY,
        "row": row,
    }


def new_other(shape=None, row=0):
    return {
        "kind": OTHER,
        "shape": shape,
        "row": row,
    }
