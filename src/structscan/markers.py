# structscan/markers.py
"""
structscan.markers  -- annotation classification for doc comments

A doc comment block is a list of raw comment texts, exactly as they appear
in the source (delimiters included). Classification runs in two steps:

  1. comment_lines() normalizes one comment into trimmed logical lines,
  2. classify() looks for the marker literals at the start of those lines.
"""

SKIP_MARKER = "easyjson:skip"
INCLUDE_MARKER = "easyjson:json"


def comment_lines(text):
    """
    Return the logical lines of one raw comment, delimiters removed.

    Comments of two characters or less are left as they are.
    """
    text = text.replace("\r", "")

    if len(text) > 2:
        if text.startswith("//"):
            text = text[2:]
        elif text.startswith("/*"):
            text = text[2:]
            if text.endswith("*/"):
                text = text[:-2]

    return [line.strip() for line in text.split("\n")]


def block_lines(comments):
    lines = []
    for c in comments:
        lines.extend(comment_lines(c))
    return lines


def classify(comments):
    """
    Classify a doc comment block.

    Returns (skip, explicit). A skip marker anywhere in the block wins over
    an include marker, wherever the include marker sits.
    """
    if not comments:
        return False, False

    lines = block_lines(comments)

    for line in lines:
        if line.startswith(SKIP_MARKER):
            return True, False

    for line in lines:
        if line.startswith(INCLUDE_MARKER):
            return False, True

    return False, False
