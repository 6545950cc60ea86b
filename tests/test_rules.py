from twml.core.rules import build_rule
from twml.core.types import GeneratedClass, escape


def test_plain_rule():
    rule, priority = build_rule(GeneratedClass("foo", "red"), ("foo",), "red")
    assert rule == "    .foo-red {\n      foo: red;\n    }"
    assert priority == 0


def test_single_value_applies_to_every_physical_property():
    rule, _ = build_rule(GeneratedClass("px", "4"), ("padding-left", "padding-right"), "1rem")
    assert rule == "    .px-4 {\n      padding-left: 1rem;\n      padding-right: 1rem;\n    }"


def test_mapping_value_gives_one_declaration_per_entry():
    value = {"font-size": "var(--font-size-lg)", "line-height": "var(--font-size-lg--line-height)"}
    rule, _ = build_rule(GeneratedClass("fs", "lg"), ("font-size",), value)
    assert "      font-size: var(--font-size-lg);" in rule
    assert "      line-height: var(--font-size-lg--line-height);" in rule


def test_breakpoint_wraps_in_media_query():
    rule, priority = build_rule(GeneratedClass("p", "4", "md"), ("padding",), "1rem", "md")
    assert rule == (
        "@media (min-width: 768px) {\n"
        "    .md\\:p-4 {\n"
        "      padding: 1rem;\n"
        "    }\n"
        "}"
    )
    assert priority == 20


def test_pseudo_states():
    for state, expected in (("hover", 100), ("focus", 101), ("active", 102)):
        rule, priority = build_rule(GeneratedClass("bg", "red", state), ("background-color",), "red", state)
        assert rule.startswith(f"    .{state}\\:bg-red:{state} {{")
        assert priority == expected


def test_dark_prefixes_ancestor_class():
    rule, priority = build_rule(GeneratedClass("bg", "black", "dark"), ("background-color",), "black", "dark")
    assert rule.startswith("    .dark .dark\\:bg-black {")
    assert priority == 200

    rule, _ = build_rule(
        GeneratedClass("bg", "black", "dark"), ("background-color",), "black", "dark", dark_class="night"
    )
    assert rule.startswith("    .night .dark\\:bg-black {")


def test_unknown_variant_renders_unwrapped():
    rule, priority = build_rule(GeneratedClass("p", "4", "print"), ("padding",), "1rem", "print")
    assert rule.startswith("    .print\\:p-4 {")
    assert priority == 0


class TestClassNames:
    def test_dom_name_keeps_bare_colon(self):
        generated = GeneratedClass("p", "4", "md")
        assert generated.name == "md:p-4"
        assert generated.selector == ".md\\:p-4"

    def test_selector_unescapes_to_dom_name(self):
        generated = GeneratedClass("w", "1.5rem", "hover")
        assert generated.selector[1:].replace("\\", "") == generated.name

    def test_escape_special_characters(self):
        assert escape("w-1/2") == "w-1\\/2"
        assert escape("p-16") == "p-16"
