"""structscan  -- find the Go types that need generated JSON code"""

__version__ = "0.1.0"

from .errors import StructscanError, UsageError, ParseError, ResolutionError, IoFailure
from .scan import scan
