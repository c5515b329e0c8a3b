"""
Unit tests for class canonicalization.
"""

from classforge.canonical import (
    canonicalize,
    drop_prefixed,
    expand_variant_groups,
    merge_classes,
    split_classes,
    variant_group,
)


class TestCanonicalize:
    """Tests for canonicalize()."""

    def test_sorts_and_deduplicates(self):
        assert canonicalize(["px-4 bg-white", "bg-white text-sm"]) == "bg-white px-4 text-sm"

    def test_ignores_empty_and_none(self):
        assert canonicalize(["", None, "  ", "p-4"]) == "p-4"

    def test_empty_input(self):
        assert canonicalize([]) == ""

    def test_collapses_whitespace(self):
        assert canonicalize(["  p-4\t\n m-2  "]) == "m-2 p-4"

    def test_result_is_sorted(self):
        result = canonicalize(["z-10 a-1 m-2 hover:bg-red-500 b-3"])
        tokens = result.split(" ")
        assert tokens == sorted(tokens)

    def test_idempotent(self):
        once = canonicalize(["text-sm font-bold p-4 text-sm"])
        assert canonicalize([once]) == once

    def test_group_is_one_token(self):
        result = canonicalize(["hover:(shadow-md scale-105)", "p-4"])
        assert result == "hover:(scale-105 shadow-md) p-4"

    def test_empty_group_dropped(self):
        assert canonicalize(["hover:()", "p-4"]) == "p-4"

    def test_merge_classes_varargs(self):
        assert merge_classes("p-4", None, "m-2 p-4") == "m-2 p-4"


class TestSplitClasses:
    def test_plain(self):
        assert split_classes("a b  c") == ["a", "b", "c"]

    def test_keeps_groups_whole(self):
        assert split_classes("p-4 focus:(ring-2 ring-offset-2) m-2") == [
            "p-4",
            "focus:(ring-2 ring-offset-2)",
            "m-2",
        ]

    def test_unclosed_group_splits_on_whitespace(self):
        assert split_classes("w-[calc(100% baz") == ["w-[calc(100%", "baz"]

    def test_unclosed_group_does_not_duplicate(self):
        assert canonicalize(["w-[calc(100% baz", "baz"]) == "baz w-[calc(100%"

    def test_drop_prefixed(self):
        assert drop_prefixed("p-4 focus:ring-2 hover:(a b) focus:outline-none", "focus:") == "p-4 hover:(a b)"


class TestVariantGroups:
    def test_variant_group(self):
        assert variant_group("hover", ["shadow-md", "bg-red-500"]) == "hover:(bg-red-500 shadow-md)"

    def test_variant_group_empty(self):
        assert variant_group("hover", []) == ""

    def test_expand(self):
        expanded = expand_variant_groups("p-4 hover:(bg-red-500 scale-105)")
        assert expanded == "hover:bg-red-500 hover:scale-105 p-4"
