"""Error taxonomy for the bundling engine."""

from typing import Optional


class GoBundleError(Exception):
    """Base class for all engine errors."""


class ParseError(GoBundleError):
    """Source text is not valid for the Go grammar."""

    def __init__(self, path: str, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.path = path
        self.line = line
        self.column = column
        location = f"{path}:{line}:{column}" if line is not None else path
        super().__init__(f"{location}: {message}")


class MetadataParseError(GoBundleError):
    """Header of an already-minified file could not be read back."""


class ManifestError(GoBundleError):
    """The module manifest (go.mod) is missing or malformed."""
