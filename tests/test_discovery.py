from structscan.discovery import filter_source_file, iter_package_files


def test_filter():
    assert filter_source_file("user.go")
    assert not filter_source_file("user_test.go")
    assert not filter_source_file("user_easyjson.go")
    assert not filter_source_file("README.md")
    assert not filter_source_file("user.go.orig")


def test_iter_package_files(tmp_path):
    for name in ["b.go", "a.go", "a_test.go", "a_easyjson.go", "notes.txt"]:
        (tmp_path / name).write_text("package x\n", encoding="utf-8")
    (tmp_path / "sub.go").mkdir()
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.go").write_text("package nested\n", encoding="utf-8")

    excluded = []
    files = list(iter_package_files(tmp_path, on_excluded=excluded.append))

    assert [p.name for p in files] == ["a.go", "b.go"]
    assert sorted(p.name for p in excluded) == ["a_easyjson.go", "a_test.go"]
