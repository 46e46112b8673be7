"""
gendiff.core — Diff tree construction
=====================================

MODEL
═════

§1  VALUES
──────────

A parsed configuration document is a tree of values.  The set V of
values is the smallest set satisfying:

    (1)  Atom(v)                    ∈ V   for v null, bool, number,
                                          string, or an opaque sequence
    (2)  Map({k₁:v₁, ..., kₙ:vₙ}) ∈ V   for kᵢ strings, vᵢ ∈ V

Sequences are NOT diffed element-wise.  A JSON array or YAML list is an
Atom like any other scalar, and two of them are equal when their
canonical text is equal.

    JSON object / YAML mapping → Map
    JSON string                → Atom("hello")
    JSON number                → Atom(42)
    JSON null                  → Atom(None)
    JSON array                 → Atom((Atom(1), Atom(2)))


§2  EQUALITY
────────────

    eq(Atom(None), Atom(None))  = true
    eq(Atom(None), x)           = false      for x ≠ Atom(None)
    eq(Map(A), Map(B))          = keys(A) = keys(B)
                                  ∧ ∀k. eq(A[k], B[k])
    eq(Map(A), Atom(b))         = false      (always, whatever text)
    eq(Atom(a), Atom(b))        = text(a) = text(b)

where text is the canonical textual form:

    text(None)   = "null"
    text(True)   = "true"            text(False) = "false"
    text(50)     = "50"              text(50.0)  = "50"
    text(0.5)    = "0.5"
    text("abc")  = "abc"
    text((1, 2)) = "[1, 2]"


§3  THE DIFF TREE
─────────────────

    build(L, R) = Root( classify(k) for k in sorted(keys(L) ∪ keys(R)) )

    classify(k) =
        Added(k, new=R[k])                 k ∉ L
        Removed(k, old=L[k])               k ∉ R
        Unchanged(k, value=L[k])           eq(L[k], R[k])
        Nested(k, build(L[k], R[k]))       L[k], R[k] both Maps
        Updated(k, old=L[k], new=R[k])     otherwise

Keys are visited in codepoint order, so the tree is the same whatever
the iteration order of the source mappings.  Tree depth equals the
nesting depth of the inputs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════
#  VALUE TYPES
# ═══════════════════════════════════════════════════════════════════

class AVal:
    """Base class for document values.  Not instantiated directly."""
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class AAtom(AVal):
    """
    A leaf value: None, bool, int, float, str, or a tuple of values
    (an opaque sequence).

    Examples:
        AAtom("hexlet.io")
        AAtom(50)
        AAtom(False)
        AAtom(None)
        AAtom((AAtom(1), AAtom(2)))
    """
    val: Any

    def __repr__(self) -> str:
        return f"AAtom({self.val!r})"


@dataclass(frozen=True, slots=True)
class AMap(AVal):
    """
    An unordered mapping of string keys to values.

    Examples:
        AMap({"host": AAtom("hexlet.io"), "timeout": AAtom(50)})
    """
    entries: dict[str, AVal]

    def __init__(self, entries: dict[str, AVal]):
        object.__setattr__(self, 'entries', dict(entries))

    def __hash__(self):
        return hash(frozenset((k, hash(v)) for k, v in self.entries.items()))

    def keys(self) -> list[str]:
        """Keys in codepoint order."""
        return sorted(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        if len(self.entries) <= 3:
            return f"AMap({self.entries})"
        return f"AMap({{...}} len={len(self.entries)})"


# ═══════════════════════════════════════════════════════════════════
#  CANONICAL TEXT & EQUALITY
# ═══════════════════════════════════════════════════════════════════

def canonical_text(val: AVal) -> str:
    """
    Canonical textual form of a value, used for atom equality and for
    rendering scalars.

    bool is checked before int: True and 1 must not share a form.
    """
    if isinstance(val, AMap):
        inner = ", ".join(f"{k}: {canonical_text(val.entries[k])}" for k in val.keys())
        return "{" + inner + "}"

    v = val.val
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        if v.is_integer() and abs(v) < 1e16:
            return str(int(v))
        return repr(v)
    if isinstance(v, str):
        return v
    if isinstance(v, tuple):
        return "[" + ", ".join(canonical_text(item) for item in v) + "]"
    return str(v)


def values_equal(a: AVal, b: AVal) -> bool:
    """
    Deep structural equality.

    A Map is never equal to an Atom, even when their texts coincide
    (``{}`` vs ``"{}"``).
    """
    a_null = isinstance(a, AAtom) and a.val is None
    b_null = isinstance(b, AAtom) and b.val is None
    if a_null or b_null:
        return a_null and b_null

    a_map = isinstance(a, AMap)
    b_map = isinstance(b, AMap)
    if a_map != b_map:
        return False

    if a_map:
        if set(a.entries) != set(b.entries):
            return False
        return all(values_equal(a.entries[k], b.entries[k]) for k in a.entries)

    return canonical_text(a) == canonical_text(b)


# ═══════════════════════════════════════════════════════════════════
#  DIFF TREE
# ═══════════════════════════════════════════════════════════════════

class NodeKind(Enum):
    """Classification of a node in the diff tree."""
    ROOT = "root"
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    NESTED = "nested"


@dataclass(frozen=True, slots=True)
class DiffNode:
    """
    One classified node of the diff tree.

    Which fields are populated depends on ``kind``:

        ROOT        children
        NESTED      key, children
        ADDED       key, new_value
        REMOVED     key, old_value
        UPDATED     key, old_value, new_value
        UNCHANGED   key, value

    A JSON ``null`` is ``AAtom(None)``; a bare ``None`` in a field
    means the field is absent.
    """
    kind: NodeKind
    key: Optional[str] = None
    value: Optional[AVal] = None
    old_value: Optional[AVal] = None
    new_value: Optional[AVal] = None
    children: Optional[tuple["DiffNode", ...]] = None

    def __repr__(self) -> str:
        label = self.key if self.key is not None else "(root)"
        if self.kind in (NodeKind.ROOT, NodeKind.NESTED):
            return f"{self.kind.name} {label} [{len(self.children)} children]"
        if self.kind == NodeKind.ADDED:
            return f"ADDED {label}: {self.new_value!r}"
        if self.kind == NodeKind.REMOVED:
            return f"REMOVED {label}: {self.old_value!r}"
        if self.kind == NodeKind.UPDATED:
            return f"UPDATED {label}: {self.old_value!r} → {self.new_value!r}"
        return f"UNCHANGED {label}: {self.value!r}"


def build_diff(left: AMap, right: AMap) -> DiffNode:
    """
    Build the diff tree between two mappings.

    Returns a ROOT node whose children are the classified keys of
    ``left ∪ right`` in ascending key order.  Pure and total: any two
    AMap values produce a tree.
    """
    keys = sorted(set(left.entries) | set(right.entries))
    children = tuple(_classify(k, left, right) for k in keys)
    return DiffNode(NodeKind.ROOT, children=children)


def _classify(key: str, left: AMap, right: AMap) -> DiffNode:
    """Classify a single key present in at least one side."""
    if key not in left.entries:
        return DiffNode(NodeKind.ADDED, key, new_value=right.entries[key])
    if key not in right.entries:
        return DiffNode(NodeKind.REMOVED, key, old_value=left.entries[key])

    old, new = left.entries[key], right.entries[key]

    if values_equal(old, new):
        return DiffNode(NodeKind.UNCHANGED, key, value=old)

    if isinstance(old, AMap) and isinstance(new, AMap):
        subtree = build_diff(old, new)
        return DiffNode(NodeKind.NESTED, key, children=subtree.children)

    return DiffNode(NodeKind.UPDATED, key, old_value=old, new_value=new)


def iter_nodes(node: DiffNode):
    """Yield every node of the tree, depth first, parents before children."""
    yield node
    for child in node.children or ():
        yield from iter_nodes(child)
