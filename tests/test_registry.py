from twml.core.registry import RuleRegistry


def test_register_is_idempotent():
    registry = RuleRegistry()
    assert registry.register("p-4", 0, "rule a")
    assert not registry.register("p-4", 0, "rule a")
    assert len(registry) == 1
    assert "p-4" in registry
    assert registry.finalize() == ["rule a"]


def test_finalize_sorts_by_priority_and_keeps_insertion_order_for_ties():
    registry = RuleRegistry()
    registry.register("dark:a", 200, "dark a")
    registry.register("b", 0, "b")
    registry.register("hover:c", 100, "hover c")
    registry.register("a", 0, "a")
    registry.register("md:d", 20, "md d")
    assert registry.finalize() == ["b", "a", "md d", "hover c", "dark a"]


def test_render_wraps_in_layer():
    registry = RuleRegistry()
    registry.register("a", 0, "A")
    registry.register("b", 0, "B")
    assert registry.render() == "@layer utilities {\nA\n\nB\n}"
    assert registry.render("components") == "@layer components {\nA\n\nB\n}"


def test_empty_registry_renders_nothing():
    assert RuleRegistry().render() == ""
