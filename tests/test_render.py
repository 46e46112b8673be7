"""
Tests for gendiff.render — stylish, plain and json layouts.

    §1  Stylish (indentation, markers, inline mappings)
    §2  Plain (paths, quoting, global sort)
    §3  JSON (field omission, structure)
    §4  Dispatch and purity
"""

import json
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gendiff.api import compare_documents, diff_tree
from gendiff.errors import DiffError, UnsupportedFormatError
from gendiff.render import (
    RENDERERS, render, render_json, render_plain, render_stylish, node_to_dict,
)

FIXTURES = Path(__file__).parent / "fixtures"

LEFT = {"host": "hexlet.io", "timeout": 50, "proxy": "123.234.53.22", "follow": False}
RIGHT = {"timeout": 20, "verbose": True, "host": "hexlet.io"}


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8").rstrip("\n")


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


# ═══════════════════════════════════════════════════════════════════
#  §1  STYLISH
# ═══════════════════════════════════════════════════════════════════

class TestStylish:

    def test_flat(self):
        expected = "\n".join([
            "{",
            "  - follow: false",
            "    host: hexlet.io",
            "  - proxy: 123.234.53.22",
            "  - timeout: 50",
            "  + timeout: 20",
            "  + verbose: true",
            "}",
        ])
        assert compare_documents(LEFT, RIGHT, "stylish") == expected

    def test_empty_documents(self):
        assert compare_documents({}, {}, "stylish") == "{\n}"

    def test_nested_fixture(self):
        result = compare_documents(load_fixture("file1.json"), load_fixture("file2.json"))
        assert result == read_fixture("result_stylish.txt")

    def test_scalars(self):
        result = compare_documents(
            {"n": None, "f": 1.5, "i": 10, "s": "text with spaces", "l": [1, "a"]},
            {"n": None, "f": 1.5, "i": 10, "s": "text with spaces", "l": [1, "a"]},
        )
        assert result == "\n".join([
            "{",
            "    f: 1.5",
            "    i: 10",
            "    l: [1, a]",
            "    n: null",
            "    s: text with spaces",
            "}",
        ])

    def test_inline_mapping_indentation(self):
        """Whole-mapping values open at 4d-2, content at 4(d+1), close at 4d."""
        result = compare_documents({"a": {"b": 1}}, {"a": {"b": 1, "c": {"d": {"e": 5}}}})
        assert result == "\n".join([
            "{",
            "    a: {",
            "        b: 1",
            "      + c: {",
            "            d: {",
            "                e: 5",
            "            }",
            "        }",
            "    }",
            "}",
        ])

    def test_empty_inline_mapping(self):
        assert compare_documents({}, {"a": {}}) == "{\n  + a: {}\n}"

    def test_unchanged_nested_mapping_rendered_once(self):
        doc = {"group": {"x": 1}}
        result = compare_documents(doc, doc, "stylish")
        assert result == "{\n    group: {\n        x: 1\n    }\n}"
        assert result.count("group") == 1

    def test_identical_documents_have_no_markers(self):
        doc = load_fixture("file1.json")
        result = compare_documents(doc, doc, "stylish")
        for line in result.splitlines():
            assert not line.lstrip().startswith(("+ ", "- ")), line

    def test_no_trailing_newline(self):
        assert not compare_documents(LEFT, RIGHT).endswith("\n")


# ═══════════════════════════════════════════════════════════════════
#  §2  PLAIN
# ═══════════════════════════════════════════════════════════════════

class TestPlain:

    def test_flat(self):
        expected = "\n".join([
            "Property 'follow' was removed",
            "Property 'proxy' was removed",
            "Property 'timeout' was updated. From 50 to 20",
            "Property 'verbose' was added with value: true",
        ])
        assert compare_documents(LEFT, RIGHT, "plain") == expected

    def test_nested_fixture(self):
        result = compare_documents(load_fixture("file1.json"), load_fixture("file2.json"), "plain")
        assert result == read_fixture("result_plain.txt")

    def test_identical_documents_empty(self):
        doc = load_fixture("file2.json")
        assert compare_documents(doc, doc, "plain") == ""

    def test_unchanged_nested_contributes_nothing(self):
        result = compare_documents({"g": {"x": 1}, "a": 1}, {"g": {"x": 1}, "a": 2}, "plain")
        assert result == "Property 'a' was updated. From 1 to 2"

    def test_value_formatting(self):
        result = compare_documents(
            {"s": "x", "n": None, "b": True, "m": {"k": 1}, "l": [1]},
            {"s": None, "n": "y", "b": 0, "m": 3.5, "l": "z"},
            "plain",
        )
        assert result.splitlines() == [
            "Property 'b' was updated. From true to 0",
            "Property 'l' was updated. From [1] to 'z'",
            "Property 'm' was updated. From [complex value] to 3.5",
            "Property 'n' was updated. From null to 'y'",
            "Property 's' was updated. From 'x' to null",
        ]

    def test_sequences_printed_as_text(self):
        result = compare_documents({"l": [1, 2]}, {"l": [1, 3], "n": [5, "a"]}, "plain")
        assert result.splitlines() == [
            "Property 'l' was updated. From [1, 2] to [1, 3]",
            "Property 'n' was added with value: [5, a]",
        ]

    def test_large_float(self):
        assert compare_documents({}, {"f": 1e300}) == "{\n  + f: 1e+300\n}"

    def test_lines_sorted_by_text_not_tree_order(self):
        """'a' sorts before 'a-b' as a key, but "'a-b'" sorts before "'a.x'" as text."""
        left = {"a": {"x": 1}, "a-b": 1}
        right = {"a": {"x": 2}}
        tree = diff_tree(left, right)
        assert [c.key for c in tree.children] == ["a", "a-b"]
        assert render_plain(tree).splitlines() == [
            "Property 'a-b' was removed",
            "Property 'a.x' was updated. From 1 to 2",
        ]

    def test_sorted_regardless_of_insertion_order(self):
        left = {"z": 1, "m": 1, "a": 1}
        right = {"a": 2, "m": 2, "z": 2}
        lines = compare_documents(left, right, "plain").splitlines()
        assert lines == sorted(lines)
        assert len(lines) == 3

    def test_every_changed_key_addressed_once(self):
        left = {"a": 1, "b": 2, "c": 3}
        right = {"b": 20, "c": 3, "d": 4}
        lines = compare_documents(left, right, "plain").splitlines()
        addressed = [line.split("'")[1] for line in lines]
        assert addressed == ["a", "b", "d"]


# ═══════════════════════════════════════════════════════════════════
#  §3  JSON
# ═══════════════════════════════════════════════════════════════════

class TestJson:

    def test_exact_layout(self):
        assert compare_documents({"a": 1}, {"a": 1}, "json") == "\n".join([
            "{",
            '  "type": "root",',
            '  "children": [',
            "    {",
            '      "type": "unchanged",',
            '      "key": "a",',
            '      "value": 1',
            "    }",
            "  ]",
            "}",
        ])

    def test_flat_structure(self):
        doc = json.loads(compare_documents(LEFT, RIGHT, "json"))
        assert doc["type"] == "root"
        assert "key" not in doc
        children = {c["key"]: c for c in doc["children"]}
        assert children["follow"] == {"type": "removed", "key": "follow", "oldValue": False}
        assert children["host"] == {"type": "unchanged", "key": "host", "value": "hexlet.io"}
        assert children["timeout"] == {
            "type": "updated", "key": "timeout", "oldValue": 50, "newValue": 20,
        }
        assert children["verbose"] == {"type": "added", "key": "verbose", "newValue": True}

    def test_null_values_are_emitted(self):
        doc = json.loads(compare_documents({"a": None}, {"a": 0}, "json"))
        assert doc["children"][0] == {"type": "updated", "key": "a", "oldValue": None, "newValue": 0}

    def test_nested_children(self):
        doc = json.loads(compare_documents(load_fixture("file1.json"), load_fixture("file2.json"), "json"))
        common = doc["children"][0]
        assert common["type"] == "nested"
        assert common["key"] == "common"
        assert "value" not in common
        setting5 = [c for c in common["children"] if c["key"] == "setting5"][0]
        assert setting5["newValue"] == {"key5": "value5"}

    def test_empty_documents_keep_children(self):
        assert json.loads(compare_documents({}, {}, "json")) == {"type": "root", "children": []}

    def test_identical_documents_only_unchanged(self):
        doc = load_fixture("file1.json")
        tree = json.loads(compare_documents(doc, doc, "json"))
        assert {c["type"] for c in tree["children"]} == {"unchanged"}

    def test_non_ascii_verbatim(self):
        assert "привет" in compare_documents({}, {"greeting": "привет"}, "json")

    def test_node_to_dict_matches_render(self):
        tree = diff_tree(LEFT, RIGHT)
        assert json.loads(render_json(tree)) == node_to_dict(tree)


# ═══════════════════════════════════════════════════════════════════
#  §4  DISPATCH & PURITY
# ═══════════════════════════════════════════════════════════════════

class TestDispatch:

    def test_registered_formats(self):
        assert set(RENDERERS) == {"stylish", "plain", "json"}

    def test_default_is_stylish(self):
        assert compare_documents(LEFT, RIGHT) == render_stylish(diff_tree(LEFT, RIGHT))

    def test_case_insensitive(self):
        tree = diff_tree(LEFT, RIGHT)
        assert render(tree, "PLAIN") == render_plain(tree)

    def test_unsupported_format(self):
        with pytest.raises(UnsupportedFormatError, match="unsupported format: xml"):
            compare_documents(LEFT, RIGHT, "xml")

    def test_unsupported_format_is_diff_error(self):
        with pytest.raises(DiffError):
            render(diff_tree({}, {}), "yaml")

    @pytest.mark.parametrize("fmt", ["stylish", "plain", "json"])
    def test_rendering_is_repeatable(self, fmt):
        tree = diff_tree(load_fixture("file1.json"), load_fixture("file2.json"))
        assert render(tree, fmt) == render(tree, fmt)
