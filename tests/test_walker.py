from structscan import node_shape as ns
from structscan.result_shape import new_result
from structscan.walker import walk, new_context, visit, CONTINUE, PRUNE

JSON = ["//easyjson:json"]
SKIP = ["//easyjson:skip"]


def _run(node, all_structs=False):
    result = new_result()
    walk(node, new_context(result, all_structs))
    return result


def _single(name, body, doc=None):
    # `type Name ...` without parentheses: the doc belongs to the group.
    return ns.new_decl_group(doc, [ns.new_type_spec(name, body)])


def _model_file():
    return ns.new_file("model.go", "model", decls=[
        _single("User", ns.new_struct_body(), JSON),
        _single("internal", ns.new_struct_body(), SKIP),
        _single("Alias", ns.new_other("type_identifier"), None),
        _single("Plain", ns.new_struct_body(), ["// Plain has no marker."]),
    ])


def test_scenario_explicit_only():
    result = _run(_model_file())
    assert result["pkg_name"] == "model"
    assert result["build_tags"] == ""
    assert result["struct_names"] == ["User"]


def test_scenario_include_all():
    assert _run(_model_file(), all_structs=True)["struct_names"] == ["User", "Plain"]


def test_scenario_group_skip():
    group = ns.new_decl_group(SKIP, [
        ns.new_type_spec("A", ns.new_struct_body()),
        ns.new_type_spec("B", ns.new_struct_body()),
    ], parenthesized=True)
    f = ns.new_file("g.go", "model", decls=[group])

    assert _run(f, all_structs=True)["struct_names"] == []


def test_group_doc_is_shared_with_every_spec():
    group = ns.new_decl_group(JSON, [
        ns.new_type_spec("A", ns.new_struct_body()),
        ns.new_type_spec("B", ns.new_other("map_type")),
    ], parenthesized=True)

    assert _run(ns.new_file("g.go", "model", decls=[group]))["struct_names"] == ["A", "B"]
    assert group["specs"][0]["doc"] is group["doc"]
    assert group["specs"][1]["doc"] is group["doc"]


def test_unmarked_group_keeps_spec_docs():
    group = ns.new_decl_group(["// types"], [
        ns.new_type_spec("A", ns.new_struct_body(), doc=SKIP),
        ns.new_type_spec("B", ns.new_struct_body(), doc=JSON),
        ns.new_type_spec("C", ns.new_struct_body()),
    ], parenthesized=True)

    assert _run(ns.new_file("g.go", "model", decls=[group]))["struct_names"] == ["B"]

    group["specs"][1]["doc"] = None
    assert _run(ns.new_file("g.go", "model", decls=[group]), all_structs=True)["struct_names"] == ["B", "C"]


def test_explicit_non_struct_is_recorded():
    f = ns.new_file("a.go", "model", decls=[_single("IDs", ns.new_other("slice_type"), JSON)])
    assert _run(f)["struct_names"] == ["IDs"]


def test_include_all_ignores_non_structs():
    f = ns.new_file("a.go", "model", decls=[
        _single("Alias", ns.new_other("type_identifier")),
        _single("Counts", ns.new_other("map_type")),
    ])
    assert _run(f, all_structs=True)["struct_names"] == []


def test_package_walks_every_file_and_keeps_duplicates():
    pkg = ns.new_package("model")
    pkg["files"] = [
        ns.new_file("a.go", "model", decls=[_single("T", ns.new_struct_body(), JSON)]),
        ns.new_file("b.go", "model", decls=[_single("T", ns.new_struct_body(), JSON)]),
    ]
    assert _run(pkg)["struct_names"] == ["T", "T"]


def test_build_tags_stick_once_found():
    pkg = ns.new_package("model")
    pkg["files"] = [
        ns.new_file("a.go", "model", leading=["//go:build linux"]),
        ns.new_file("b.go", "model", leading=["// Package model."]),
    ]
    assert _run(pkg)["build_tags"] == "linux"


def test_other_nodes_are_pruned():
    ctx = new_context(new_result())
    assert visit(ns.new_other("function_declaration"), ctx) == PRUNE
    assert visit(ns.new_package("model"), ctx) == CONTINUE


def test_contexts_are_independent():
    f = _model_file()
    first = _run(f, all_structs=True)
    second = _run(f)
    assert first["struct_names"] == ["User", "Plain"]
    assert second["struct_names"] == ["User"]
