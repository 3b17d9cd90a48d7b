# structscan/discovery.py
from pathlib import Path

SOURCE_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"

# Output of a previous generator run sitting next to the sources.
GENERATED_SUFFIX = "_easyjson.go"


def include_go_files(name):
    return name.endswith(SOURCE_SUFFIX)


def exclude_test_files(name):
    return not name.endswith(TEST_SUFFIX)


def exclude_generated_files(name):
    return not name.endswith(GENERATED_SUFFIX)


def filter_source_file(name):
    return include_go_files(name) and exclude_test_files(name) and exclude_generated_files(name)


def iter_package_files(directory, file_filter=filter_source_file, on_excluded=None):
    """
    Yield the files of one package directory, sorted by name.

    Only regular files directly inside `directory` are considered; nested
    directories are other packages. `on_excluded` is called with the path
    of every `.go` file the filter rejects.
    """
    entries = sorted(Path(directory).iterdir(), key=lambda p: p.name)
    for p in entries:
        if not p.is_file():
            continue
        if file_filter(p.name):
            yield p
        elif on_excluded is not None and include_go_files(p.name):
            on_excluded(p)
