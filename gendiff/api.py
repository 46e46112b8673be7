"""
gendiff.api — Entry points.

    compare_documents(left, right, "plain")         parsed mappings in
    generate_diff("a.json", "b.yml", "stylish")     file paths in

Both return the rendered text and raise DiffError subclasses on
failure.  Loader errors pass through unchanged.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from loguru import logger

from .core import AMap, DiffNode, build_diff, iter_nodes
from .formats import from_python
from .loader import load_document
from .render import get_renderer, render


def _as_map(doc: Union[Mapping[str, Any], AMap], side: str) -> AMap:
    val = from_python(dict(doc) if isinstance(doc, Mapping) else doc)
    if not isinstance(val, AMap):
        raise TypeError(f"{side} document must be a mapping, got {type(doc).__name__}")
    return val


def diff_tree(left: Union[Mapping[str, Any], AMap],
              right: Union[Mapping[str, Any], AMap]) -> DiffNode:
    """Build the diff tree for two parsed documents."""
    tree = build_diff(_as_map(left, "left"), _as_map(right, "right"))
    logger.debug("Built diff tree: {} top-level entries, {} nodes",
                 len(tree.children), sum(1 for _ in iter_nodes(tree)))
    return tree


def compare_documents(left: Union[Mapping[str, Any], AMap],
                      right: Union[Mapping[str, Any], AMap],
                      format_name: str = "stylish") -> str:
    """
    Compare two parsed documents and render the result.

    Raises UnsupportedFormatError if ``format_name`` is not one of
    stylish, plain, json.  The format is checked before any work is done.
    """
    get_renderer(format_name)
    return render(diff_tree(left, right), format_name)


def generate_diff(path1: Union[str, Path], path2: Union[str, Path],
                  format_name: str = "stylish") -> str:
    """Load two JSON/YAML files and render their difference."""
    left = load_document(path1)
    right = load_document(path2)
    return compare_documents(left, right, format_name)
