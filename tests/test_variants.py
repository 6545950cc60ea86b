from twml.core.rules import build_rule
from twml.core.types import GeneratedClass, VariantKind
from twml.core.variants import VARIANTS, lookup_variant, parse_variant


class TestParseVariant:
    def test_single_colon_splits(self):
        assert parse_variant("md:16") == ("md", "16")
        assert parse_variant("hover:blue") == ("hover", "blue")

    def test_no_colon_is_plain_value(self):
        assert parse_variant("16") == (None, "16")

    def test_two_colons_are_not_a_variant(self):
        assert parse_variant("md:hover:4") == (None, "md:hover:4")

    def test_unknown_prefix_is_still_split(self):
        assert parse_variant("print:4") == ("print", "4")

    def test_trailing_colon_gives_empty_value(self):
        assert parse_variant("hover:") == ("hover", "")

    def test_leading_colon_has_no_variant(self):
        assert parse_variant(":4") == (None, "4")


def test_priorities_follow_cascade_order():
    ordered = ["sm", "md", "lg", "xl", "hover", "focus", "active", "dark"]
    priorities = [lookup_variant(name).priority for name in ordered]
    assert priorities == sorted(priorities)
    assert len(set(priorities)) == len(priorities)
    assert priorities[0] > 0


def test_unvaried_and_unknown_variants_use_base_priority():
    for variant in (None, "print"):
        _, priority = build_rule(GeneratedClass("p", "4", variant), ("padding",), "1px", variant)
        assert priority == 0


def test_pseudo_states_are_one_apart():
    assert lookup_variant("focus").priority == lookup_variant("hover").priority + 1
    assert lookup_variant("active").priority == lookup_variant("focus").priority + 1


def test_variant_kinds():
    assert lookup_variant("lg").kind is VariantKind.BREAKPOINT
    assert lookup_variant("lg").min_width == "1024px"
    assert lookup_variant("active").kind is VariantKind.PSEUDO_STATE
    assert lookup_variant("dark").kind is VariantKind.THEME
    assert lookup_variant("print") is None
    assert lookup_variant("") is None
    assert set(VARIANTS) == {"sm", "md", "lg", "xl", "hover", "focus", "active", "dark"}
