class ScannerError(Exception):
    """Base class for errors raised by the scanner."""


class ConfigLoadError(ScannerError):
    """The configuration document is missing, unreadable or invalid. Fatal."""


class ParseError(ScannerError):
    """A source file could not be read or parsed. The file is skipped."""

    def __init__(self, path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class UnreadableFileError(ParseError):
    """The file could not be opened or read at all."""
