"""Turn a resolved property and a raw token into CSS value text.

Every raw token is first classified into one of the closed ``ValueKind``
tags, and synthesis then picks exactly one branch:

1. ``font-size`` is special: size tokens become a size/line-height pair of
   design variables, bare integers use the spacing formula, everything else
   is kept verbatim.
2. A hit in the predefined value table is substituted.
3. Color properties reference ``--color-<token>`` when the token source
   defines it.
4. Bare integers on spacing properties use ``calc(var(--spacing) * n)``.
5. ``grid-template-columns`` with a bare integer becomes an equal-width
   ``repeat()`` track list.
6. Anything else passes through unchanged.
"""

import re
from typing import Optional

from twml.core.tables import (
    COLOR_PROPERTIES,
    FONT_SIZE_TOKENS,
    PREDEFINED_VALUES,
    SPACING_PROPERTIES,
    SPACING_VARIABLE,
)
from twml.core.types import CssValue, Resolution, ResolvedValue, ValueKind
from twml.tokens import NullTokenSource, TokenSource

NUMERIC_LITERAL = re.compile(r"^[0-9]+$")
UNIT_VALUE = re.compile(r"^-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)[a-zA-Z%]+$")

_NO_TOKENS = NullTokenSource()


def is_numeric_literal(raw: str) -> bool:
    return bool(NUMERIC_LITERAL.match(raw))


def spacing_formula(count: str) -> str:
    return f"calc(var({SPACING_VARIABLE}) * {count})"


def classify_value(
    css_property: str, raw: str, token_source: Optional[TokenSource] = None
) -> ValueKind:
    """Classify a raw token; color lookups only happen for color properties."""
    if css_property in COLOR_PROPERTIES and (token_source or _NO_TOKENS).has_color(raw):
        return ValueKind.COLOR_TOKEN
    if is_numeric_literal(raw):
        return ValueKind.NUMERIC_LITERAL
    if UNIT_VALUE.match(raw):
        return ValueKind.UNIT_VALUE
    return ValueKind.RAW_LITERAL


def _font_size(raw: str, kind: ValueKind) -> ResolvedValue:
    if raw in FONT_SIZE_TOKENS:
        declarations = {
            "font-size": f"var(--font-size-{raw})",
            "line-height": f"var(--font-size-{raw}--line-height)",
        }
        return ResolvedValue(declarations, kind, Resolution.RESOLVED)
    if kind is ValueKind.NUMERIC_LITERAL:
        return ResolvedValue({"font-size": spacing_formula(raw)}, kind, Resolution.RESOLVED)
    return ResolvedValue({"font-size": raw}, kind, Resolution.PASS_THROUGH)


def resolve_value(
    css_property: str, raw: str, token_source: Optional[TokenSource] = None
) -> ResolvedValue:
    """Synthesize a value and report which branch produced it."""
    kind = classify_value(css_property, raw, token_source)

    if css_property == "font-size":
        return _font_size(raw, kind)

    predefined = PREDEFINED_VALUES.get(css_property, {}).get(raw)
    if predefined is not None:
        return ResolvedValue(predefined, kind, Resolution.RESOLVED)

    if kind is ValueKind.COLOR_TOKEN:
        return ResolvedValue(f"var(--color-{raw})", kind, Resolution.RESOLVED)

    if kind is ValueKind.NUMERIC_LITERAL:
        if css_property in SPACING_PROPERTIES:
            return ResolvedValue(spacing_formula(raw), kind, Resolution.RESOLVED)
        if css_property == "grid-template-columns":
            return ResolvedValue(f"repeat({raw}, minmax(0, 1fr))", kind, Resolution.RESOLVED)

    return ResolvedValue(raw, kind, Resolution.PASS_THROUGH)


def synthesize(
    css_property: str, raw: str, token_source: Optional[TokenSource] = None
) -> CssValue:
    return resolve_value(css_property, raw, token_source).value
