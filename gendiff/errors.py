"""Exceptions raised by gendiff."""


class DiffError(Exception):
    """Base class for every error a comparison can report."""


class UnsupportedFormatError(DiffError):
    """The requested output format is not one of the registered renderers."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unsupported format: {name}")


class DocumentNotFoundError(DiffError):
    """The input path does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"file not found: {path}")


class DocumentReadError(DiffError):
    """The input path exists but could not be read."""


class UnsupportedFileFormatError(DiffError):
    """The input file extension is missing or not a known document type."""


class DocumentParseError(DiffError):
    """The input file is not a well-formed JSON or YAML mapping."""
