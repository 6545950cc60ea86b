"""Variant prefixes: parsing ``variant:value`` tokens and the closed variant set."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from twml.core.types import Variant, VariantKind

BREAKPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
    }
)

VARIANTS: Mapping[str, Variant] = MappingProxyType(
    {
        "sm": Variant("sm", VariantKind.BREAKPOINT, 10, BREAKPOINTS["sm"]),
        "md": Variant("md", VariantKind.BREAKPOINT, 20, BREAKPOINTS["md"]),
        "lg": Variant("lg", VariantKind.BREAKPOINT, 30, BREAKPOINTS["lg"]),
        "xl": Variant("xl", VariantKind.BREAKPOINT, 40, BREAKPOINTS["xl"]),
        "hover": Variant("hover", VariantKind.PSEUDO_STATE, 100),
        "focus": Variant("focus", VariantKind.PSEUDO_STATE, 101),
        "active": Variant("active", VariantKind.PSEUDO_STATE, 102),
        "dark": Variant("dark", VariantKind.THEME, 200),
    }
)

BASE_PRIORITY = 0


def parse_variant(raw_token: str) -> Tuple[Optional[str], str]:
    """Split ``md:16`` into ``("md", "16")``.

    Only a token with exactly one colon carries a variant; anything else is
    returned whole as the value. An empty prefix (``:4``) means no variant.
    """
    parts = raw_token.split(":")
    if len(parts) == 2:
        return parts[0] or None, parts[1]
    return None, raw_token


def lookup_variant(name: Optional[str]) -> Optional[Variant]:
    if not name:
        return None
    return VARIANTS.get(name)
