# structscan/walker.py
"""
structscan.walker  -- selection of the types that get generated code

The walk is a depth-first descent over node_shape dicts. Every visit returns
an explicit decision: CONTINUE descends into the node's children, PRUNE
stops there. All state lives in the context dict passed along the walk.

Selection policy per node kind:

  package      continue into every file
  file         record the package name and build constraint, continue
  decl-group   hand a skip/include doc down to every spec, continue
  type-spec    skip -> prune
               explicit -> record the name, prune
               include-all mode -> remember the name, continue into the body
               otherwise prune
  struct-body  record the remembered name, prune
  other        prune
"""
from . import markers
from .build_tags import extract_build_tags
from .node_shape import PACKAGE, FILE, DECL_GROUP, TYPE_SPEC, STRUCT_BODY

CONTINUE = "continue"
PRUNE = "prune"


def new_context(result, all_structs=False):
    return {
        "result": result,
        "all_structs": all_structs,
        "candidate": None,   # type-spec name on its way to its struct body
    }


def walk(node, ctx):
    if visit(node, ctx) == PRUNE:
        return
    for child in children(node):
        walk(child, ctx)


def visit(node, ctx):
    fn = _VISITORS.get(node["kind"])
    if fn is None:
        return PRUNE
    return fn(node, ctx)


def children(node):
    kind = node["kind"]
    if kind == PACKAGE:
        return node["files"]
    if kind == FILE:
        return node["decls"]
    if kind == DECL_GROUP:
        return node["specs"]
    if kind == TYPE_SPEC:
        return [node["body"]]
    return []


# ------------------------------------------------------------
# Visitors
# ------------------------------------------------------------

def _visit_package(node, ctx):
    return CONTINUE


def _visit_file(node, ctx):
    result = ctx["result"]
    result["pkg_name"] = node["package"]

    tags = extract_build_tags(node["leading"])
    if tags is not None:
        result["build_tags"] = tags

    return CONTINUE


def _visit_decl_group(node, ctx):
    skip, explicit = markers.classify(node["doc"])

    # The group's doc is attached to the group only; specs need to see it
    # as their own.
    if skip or explicit:
        for spec in node["specs"]:
            if spec["kind"] == TYPE_SPEC:
                spec["doc"] = node["doc"]

    return CONTINUE


def _visit_type_spec(node, ctx):
    skip, explicit = markers.classify(node["doc"])
    if skip:
        return PRUNE
    if not explicit and not ctx["all_structs"]:
        return PRUNE

    ctx["candidate"] = node["name"]

    # An explicit marker selects the type whatever its shape.
    if explicit:
        ctx["result"]["struct_names"].append(node["name"])
        return PRUNE

    return CONTINUE


def _visit_struct_body(node, ctx):
    ctx["result"]["struct_names"].append(ctx["candidate"])
    return PRUNE


_VISITORS = {
    PACKAGE: _visit_package,
    FILE: _visit_file,
    DECL_GROUP: _visit_decl_group,
    TYPE_SPEC: _visit_type_spec,
    STRUCT_BODY: _visit_struct_body,
}
