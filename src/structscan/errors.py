# structscan/errors.py

class StructscanError(Exception):
    pass


class UsageError(StructscanError):
    pass


class ParseError(StructscanError):
    """Go source that the grammar cannot parse."""

    def __init__(self, path, line, col, msg):
        self.path = path
        self.line = line
        self.col = col
        self.msg = msg
        super().__init__(f"{path}:{line}:{col}: {msg}")


class ResolutionError(StructscanError):
    """A filesystem path that cannot be mapped to a Go import path."""
    pass


class IoFailure(StructscanError):
    pass
