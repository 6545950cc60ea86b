"""CSS rule text for one generated class, wrapped for its variant."""

from collections.abc import Mapping
from typing import List, Optional, Sequence, Tuple

from twml.core.types import CssValue, GeneratedClass, VariantKind
from twml.core.variants import BASE_PRIORITY, lookup_variant

DECLARATION_INDENT = " " * 6
BLOCK_INDENT = " " * 4
DEFAULT_DARK_CLASS = "dark"


def declarations(physical_properties: Sequence[str], css_value: CssValue) -> List[str]:
    if isinstance(css_value, Mapping):
        pairs = list(css_value.items())
    else:
        pairs = [(prop, css_value) for prop in physical_properties]
    return [f"{DECLARATION_INDENT}{prop}: {value};" for prop, value in pairs]


def block(selector: str, lines: Sequence[str]) -> str:
    body = "\n".join(lines)
    return f"{BLOCK_INDENT}{selector} {{\n{body}\n{BLOCK_INDENT}}}"


def build_rule(
    generated: GeneratedClass,
    physical_properties: Sequence[str],
    css_value: CssValue,
    variant: Optional[str] = None,
    dark_class: str = DEFAULT_DARK_CLASS,
) -> Tuple[str, int]:
    """Render the rule for ``generated`` and return it with its priority.

    Breakpoints wrap the block in a ``min-width`` media query, pseudo-states
    append ``:state`` to the selector and the dark theme prefixes an ancestor
    class. Unknown variants render unwrapped at the base priority.
    """
    lines = declarations(physical_properties, css_value)
    selector = generated.selector
    spec = lookup_variant(variant)

    if spec is None:
        return block(selector, lines), BASE_PRIORITY

    if spec.kind is VariantKind.BREAKPOINT:
        rule = block(selector, lines)
        return f"@media (min-width: {spec.min_width}) {{\n{rule}\n}}", spec.priority

    if spec.kind is VariantKind.PSEUDO_STATE:
        return block(f"{selector}:{spec.name}", lines), spec.priority

    return block(f".{dark_class} {selector}", lines), spec.priority
