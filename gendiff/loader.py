"""
gendiff.loader — Read configuration documents from disk.

The parser is chosen by file extension:

    .json          → json
    .yml / .yaml   → PyYAML (safe loader)

Every failure is raised as a DiffError subclass with the underlying
exception chained.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml
from loguru import logger

from .errors import (
    DocumentNotFoundError,
    DocumentParseError,
    DocumentReadError,
    UnsupportedFileFormatError,
)

EXTENSIONS = {
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
}


def detect_format(path: Union[str, Path]) -> str:
    """Return ``"json"`` or ``"yaml"`` for ``path`` based on its extension."""
    ext = Path(path).suffix.lower()
    if not ext:
        raise UnsupportedFileFormatError(f"cannot determine file format for {path}")
    try:
        return EXTENSIONS[ext]
    except KeyError:
        raise UnsupportedFileFormatError(f"unsupported file format: {ext}") from None


def parse_document(text: str, fmt: str) -> dict[str, Any]:
    """
    Parse ``text`` as ``fmt`` ("json" or "yaml") into a mapping.

    An empty YAML document is an empty mapping.  Any other top-level
    value that is not a mapping is rejected.
    """
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            raise DocumentParseError(f"failed to parse JSON: {err}") from err
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise DocumentParseError(f"failed to parse YAML: {err}") from err
        if data is None:
            data = {}
    else:
        raise UnsupportedFileFormatError(f"unsupported file format: {fmt}")

    if not isinstance(data, dict):
        raise DocumentParseError(
            f"failed to parse {fmt.upper()}: top-level value must be a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def load_document(path: Union[str, Path]) -> dict[str, Any]:
    """Read and parse the configuration document at ``path``."""
    path = Path(path)
    if not path.exists():
        raise DocumentNotFoundError(path)

    fmt = detect_format(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise DocumentReadError(f"failed to read file {path}: {err}") from err

    data = parse_document(text, fmt)
    logger.debug("Loaded {} ({}, {} top-level keys)", path, fmt, len(data))
    return data
