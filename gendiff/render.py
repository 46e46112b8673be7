"""
gendiff.render — Text renderers for the diff tree.

Three layouts, selected by name:

    stylish   brace-delimited tree, ``+``/``-`` markers, 4-space levels
    plain     one sorted line per change, addressed by dotted path
    json      the tree itself as an indented JSON document

Every renderer is a pure function of the tree: rendering the same tree
twice gives byte-identical text.
"""

import json
from typing import Callable

from loguru import logger

from .core import AMap, AVal, DiffNode, NodeKind, canonical_text
from .errors import UnsupportedFormatError
from .formats import to_python


# ═══════════════════════════════════════════════════════════════════
#  STYLISH
# ═══════════════════════════════════════════════════════════════════
#
#  At depth d (root children are d=1) a line is
#
#      (4d - 2 spaces) + marker + key + ": " + value
#
#  with marker one of "+ ", "- ", "  ".  The marker always takes two
#  columns, so keys line up at column 4d whatever the node kind.
#  Closing braces of a block opened at depth d sit at 4d spaces.

def _indent(depth: int) -> str:
    return " " * (4 * depth - 2)


def _stylish_value(val: AVal, depth: int) -> str:
    """Format a whole value on a line opened at ``depth``."""
    if isinstance(val, AMap):
        if not val.entries:
            return "{}"
        lines = [
            f"{_indent(depth + 1)}  {k}: {_stylish_value(val.entries[k], depth + 1)}"
            for k in val.keys()
        ]
        return "{\n" + "\n".join(lines) + "\n" + " " * (4 * depth) + "}"
    return canonical_text(val)


def _stylish_lines(children: tuple[DiffNode, ...], depth: int) -> list[str]:
    indent = _indent(depth)
    lines: list[str] = []

    for child in children:
        if child.kind == NodeKind.ADDED:
            lines.append(f"{indent}+ {child.key}: {_stylish_value(child.new_value, depth)}")
        elif child.kind == NodeKind.REMOVED:
            lines.append(f"{indent}- {child.key}: {_stylish_value(child.old_value, depth)}")
        elif child.kind == NodeKind.UPDATED:
            lines.append(f"{indent}- {child.key}: {_stylish_value(child.old_value, depth)}")
            lines.append(f"{indent}+ {child.key}: {_stylish_value(child.new_value, depth)}")
        elif child.kind == NodeKind.UNCHANGED:
            lines.append(f"{indent}  {child.key}: {_stylish_value(child.value, depth)}")
        elif child.kind == NodeKind.NESTED:
            lines.append(f"{indent}  {child.key}: {{")
            lines.extend(_stylish_lines(child.children, depth + 1))
            lines.append(" " * (4 * depth) + "}")
        else:
            raise ValueError(f"Unexpected node kind below root: {child.kind}")

    return lines


def render_stylish(tree: DiffNode) -> str:
    """
    Render the tree as a brace-delimited, indented listing.

        {
            host: hexlet.io
          - timeout: 50
          + timeout: 20
        }

    Two empty documents render as ``{\\n}``.
    """
    return "\n".join(["{", *_stylish_lines(tree.children, 1), "}"])


# ═══════════════════════════════════════════════════════════════════
#  PLAIN
# ═══════════════════════════════════════════════════════════════════

COMPLEX_VALUE = "[complex value]"


def _plain_value(val: AVal) -> str:
    if isinstance(val, AMap):
        return COMPLEX_VALUE
    if isinstance(val.val, str):
        return f"'{val.val}'"
    return canonical_text(val)


def _plain_lines(children: tuple[DiffNode, ...], path: tuple[str, ...]):
    for child in children:
        child_path = path + (child.key,)
        prop = ".".join(child_path)

        if child.kind == NodeKind.ADDED:
            yield f"Property '{prop}' was added with value: {_plain_value(child.new_value)}"
        elif child.kind == NodeKind.REMOVED:
            yield f"Property '{prop}' was removed"
        elif child.kind == NodeKind.UPDATED:
            yield (
                f"Property '{prop}' was updated. "
                f"From {_plain_value(child.old_value)} to {_plain_value(child.new_value)}"
            )
        elif child.kind == NodeKind.NESTED:
            yield from _plain_lines(child.children, child_path)


def render_plain(tree: DiffNode) -> str:
    """
    Render one line per change.

    Lines are collected from the whole tree first, then sorted by their
    full text, so the output order does not follow tree order.
    Unchanged entries produce nothing; identical documents give ``""``.
    """
    lines = list(_plain_lines(tree.children, ()))
    lines.sort()
    return "\n".join(lines)


# ═══════════════════════════════════════════════════════════════════
#  JSON
# ═══════════════════════════════════════════════════════════════════

def node_to_dict(node: DiffNode) -> dict:
    """
    Plain-dict form of a node.

    Only the fields populated for the node's kind are present; a field
    holding a JSON null is still emitted.
    """
    out: dict = {"type": node.kind.value}
    if node.key is not None:
        out["key"] = node.key
    if node.value is not None:
        out["value"] = to_python(node.value)
    if node.old_value is not None:
        out["oldValue"] = to_python(node.old_value)
    if node.new_value is not None:
        out["newValue"] = to_python(node.new_value)
    if node.children is not None:
        out["children"] = [node_to_dict(child) for child in node.children]
    return out


def render_json(tree: DiffNode) -> str:
    """Render the whole tree as an indented JSON document."""
    return json.dumps(node_to_dict(tree), indent=2, ensure_ascii=False, default=str)


# ═══════════════════════════════════════════════════════════════════
#  DISPATCH
# ═══════════════════════════════════════════════════════════════════

RENDERERS: dict[str, Callable[[DiffNode], str]] = {
    "stylish": render_stylish,
    "plain": render_plain,
    "json": render_json,
}


def get_renderer(format_name: str) -> Callable[[DiffNode], str]:
    """Look up a renderer by name (case-insensitive)."""
    try:
        return RENDERERS[format_name.lower()]
    except KeyError:
        raise UnsupportedFormatError(format_name) from None


def render(tree: DiffNode, format_name: str = "stylish") -> str:
    """Render ``tree`` in the named format."""
    renderer = get_renderer(format_name)
    logger.debug("Rendering diff tree as {}", format_name.lower())
    return renderer(tree)
