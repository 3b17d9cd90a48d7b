# structscan/gotree.py
"""
structscan.gotree  -- Go source -> walker nodes

Parsing is done by tree-sitter with the tree-sitter-go grammar. The concrete
syntax tree is reduced to the node dicts of node_shape: one file node per
compilation unit, one decl-group per top-level `type` declaration.

Comment groups follow the Go toolchain's rules:

  - consecutive comments with no blank line between them form one group,
  - a comment starting on the same line as the token before it begins a
    trailing group, which only extends along that same line,
  - a non-trailing group that ends on the line right before a declaration is
    that declaration's doc.
"""

import tree_sitter
import tree_sitter_go

from . import node_shape
from .discovery import iter_package_files, filter_source_file
from .errors import ParseError

GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())

_TERMINATOR_TEXTS = (b"", b";", b"\x00")


def parse_source(source, path="<input>"):
    if isinstance(source, str):
        source = source.encode("utf-8")

    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        line = source[:e.start].count(b"\n") + 1
        raise ParseError(path, line, 1, "invalid UTF-8 encoding")

    tree = tree_sitter.Parser(GO_LANGUAGE).parse(source)
    root = tree.root_node

    if root.has_error:
        bad = _first_error(root)
        row, col = bad.start_point[0], bad.start_point[1]
        if bad.is_missing:
            msg = f"missing {bad.type}"
        else:
            msg = "syntax error"
        raise ParseError(path, row + 1, col + 1, msg)

    return _file_node(root, str(path))


def parse_file(path):
    with open(path, "rb") as f:
        source = f.read()
    return parse_source(source, str(path))


def parse_dir(directory, file_filter=filter_source_file, on_excluded=None):
    """
    Parse every file of a package directory and group them by package name.

    The whole batch is parsed before anything is returned, so one bad file
    fails the directory.
    """
    units = [parse_file(p) for p in iter_package_files(directory, file_filter, on_excluded)]

    packages = {}
    for unit in units:
        pkg = packages.get(unit["package"])
        if pkg is None:
            pkg = packages[unit["package"]] = node_shape.new_package(unit["package"])
        pkg["files"].append(unit)

    return list(packages.values())


# ------------------------------------------------------------
# Tree reduction
# ------------------------------------------------------------

def _file_node(root, path):
    children = _tokens(root)

    clause = None
    for c in children:
        if c.type == "package_clause":
            clause = c
            break
    if clause is None:
        raise ParseError(path, 1, 1, "expected 'package' clause")

    name = ""
    for c in clause.named_children:
        if c.type == "package_identifier":
            name = _text(c)

    leading = [_text(c) for c in children
               if c.type == "comment" and c.start_byte < clause.start_byte]

    docs = _doc_groups(children)
    decls = []
    for i, c in enumerate(children):
        if c.type == "type_declaration":
            decls.append(_decl_group(c, _doc_for(children, i, docs)))

    return node_shape.new_file(path, name, clause.start_point[0], leading, decls)


def _decl_group(node, doc):
    children = _tokens(node)
    parenthesized = any(c.type == "(" for c in children)

    # Without parentheses the only doc is the group's own.
    docs = _doc_groups(children) if parenthesized else {}

    specs = []
    for i, c in enumerate(children):
        if c.type in ("type_spec", "type_alias"):
            spec_doc = _doc_for(children, i, docs) if parenthesized else None
            specs.append(_type_spec(c, spec_doc))

    return node_shape.new_decl_group(doc, specs, parenthesized, node.start_point[0])


def _type_spec(node, doc):
    name = node.child_by_field_name("name")
    typ = node.child_by_field_name("type")
    row = node.start_point[0]

    if typ is not None and typ.type == "struct_type":
        body = node_shape.new_struct_body(typ.start_point[0])
    else:
        body = node_shape.new_other(typ.type if typ is not None else None, row)

    return node_shape.new_type_spec(
        _text(name) if name is not None else "",
        body,
        doc=doc,
        alias=(node.type == "type_alias"),
        row=row,
    )


# ------------------------------------------------------------
# Comment groups
# ------------------------------------------------------------

def _doc_groups(siblings):
    """
    Group the comments among `siblings`.

    Returns {index of the group's last comment: group}, where a group is a
    dict with the comment indices, its end row and whether it trails a token.
    """
    out = {}
    cur = None
    prev_end_row = None

    for i, n in enumerate(siblings):
        if n.type != "comment":
            cur = None
            prev_end_row = n.end_point[0]
            continue

        row = n.start_point[0]
        if cur is not None:
            slack = 0 if cur["trailing"] else 1
            if row <= cur["end_row"] + slack:
                del out[cur["items"][-1]]
                cur["items"].append(i)
                cur["end_row"] = n.end_point[0]
                out[i] = cur
                continue

        cur = {
            "items": [i],
            "end_row": n.end_point[0],
            "trailing": (i > 0 and siblings[i - 1].type != "comment" and row == prev_end_row),
        }
        out[i] = cur

    return out


def _doc_for(siblings, i, docs):
    group = docs.get(i - 1)
    if group is None or group["trailing"]:
        return None
    if group["end_row"] + 1 != siblings[i].start_point[0]:
        return None
    return [_text(siblings[k]) for k in group["items"]]


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def _tokens(node):
    # Statement terminators carry no information for us and would hide the
    # row of the token a comment trails.
    return [c for c in node.children if not _is_terminator(c)]


def _is_terminator(n):
    return (not n.is_named) and (n.text or b"").strip() in _TERMINATOR_TEXTS


def _text(node):
    return node.text.decode("utf-8")


def _first_error(node):
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            return _first_error(child)
    return node
