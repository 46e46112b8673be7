"""
gendiff
=======

Show the difference between two configuration documents (JSON or YAML).

    generate_diff("file1.json", "file2.yml")              → stylish tree
    generate_diff("file1.json", "file2.json", "plain")    → one line per change
    compare_documents({"a": 1}, {"a": 2}, "json")         → diff tree as JSON

Keys are compared in sorted order, nested mappings are diffed
recursively, and everything else (including lists) is compared as a
whole by its canonical text.
"""

__version__ = "0.1.0"

from gendiff.core import (
    # Types
    AVal,
    AAtom,
    AMap,
    NodeKind,
    DiffNode,
    # Diff
    build_diff,
    values_equal,
    canonical_text,
)
from gendiff.formats import from_python, to_python, from_json, to_json
from gendiff.render import render, render_stylish, render_plain, render_json, RENDERERS
from gendiff.loader import load_document, parse_document, detect_format
from gendiff.api import compare_documents, generate_diff, diff_tree
from gendiff.errors import (
    DiffError,
    UnsupportedFormatError,
    DocumentNotFoundError,
    DocumentReadError,
    UnsupportedFileFormatError,
    DocumentParseError,
)

__all__ = [
    "AVal", "AAtom", "AMap", "NodeKind", "DiffNode",
    "build_diff", "values_equal", "canonical_text",
    "from_python", "to_python", "from_json", "to_json",
    "render", "render_stylish", "render_plain", "render_json", "RENDERERS",
    "load_document", "parse_document", "detect_format",
    "compare_documents", "generate_diff", "diff_tree",
    "DiffError", "UnsupportedFormatError", "DocumentNotFoundError",
    "DocumentReadError", "UnsupportedFileFormatError", "DocumentParseError",
]
