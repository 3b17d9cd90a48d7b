import json

from structscan.cli import main


SRC = "//go:build !js\n\npackage model\n\n//easyjson:json\ntype User struct{}\n\ntype Other struct{}\n"


def _write(go_module):
    p = go_module / "model.go"
    p.write_text(SRC, encoding="utf-8")
    return p


def test_scan_to_stdout(go_module, capsys):
    p = _write(go_module)

    assert main(["scan", str(p)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {
        "pkg_path": "example.com/app",
        "pkg_name": "model",
        "build_tags": "!js",
        "types": ["User"],
    }


def test_scan_all_to_file(go_module, capsys):
    _write(go_module)
    dest = go_module / "out" / "types.json"

    assert main(["scan", str(go_module), "--all", "--pretty", "--output", str(dest)]) == 0

    assert capsys.readouterr().out == ""
    assert json.loads(dest.read_text(encoding="utf-8"))["types"] == ["User", "Other"]


def test_verbose_prints_events(go_module, capsys):
    p = _write(go_module)

    assert main(["scan", str(p), "--verbose"]) == 0

    err = capsys.readouterr().err
    assert "[info] scanning " in err
    assert "[info] selected 1 type(s) in example.com/app" in err


def test_usage_error(go_module, capsys):
    p = _write(go_module)
    assert main(["scan", str(p), "--pretty", "--compact"]) == 1
    assert "usage error" in capsys.readouterr().err


def test_parse_error(go_module, capsys):
    p = go_module / "broken.go"
    p.write_text("package model\n\ntype T struct {\n", encoding="utf-8")

    assert main(["scan", str(p)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "parse error" in captured.err


def test_resolution_error(tmp_path, capsys):
    p = tmp_path / "loose.go"
    p.write_text("package loose\n", encoding="utf-8")

    assert main(["scan", str(p)]) == 3
    assert "resolution error" in capsys.readouterr().err


def test_missing_path(tmp_path, capsys):
    assert main(["scan", str(tmp_path / "missing.go")]) == 4
    assert "io error" in capsys.readouterr().err


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("structscan ")


def test_no_command(capsys):
    assert main([]) == 1
