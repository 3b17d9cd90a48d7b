# structscan/build_tags.py

# Checked in this order on every comment.
BUILD_PREFIXES = ("//go:build ", "// +build ")


def extract_build_tags(leading):
    """
    Find the build constraint among a file's leading comments.

    `leading` holds the raw texts of the comments that sit before the
    package clause, in source order. Only `//` line comments can carry a
    constraint; block comments are never looked into. The first comment
    starting with one of BUILD_PREFIXES wins; its remainder is returned
    unmodified. Returns None when no comment matches.
    """
    for text in leading:
        if not text.startswith("//"):
            continue
        line = text.replace("\r", "")
        for prefix in BUILD_PREFIXES:
            if line.startswith(prefix):
                return line[len(prefix):]
    return None
