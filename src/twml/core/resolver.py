"""Shorthand property resolution and compound property expansion."""

from typing import Tuple

from twml.core.tables import COMPOUND_PROPERTIES, PROPERTY_ALIASES
from twml.core.types import Resolution


def resolve_property(shorthand: str) -> str:
    """Map a shorthand to its canonical property; unknown names pass through."""
    return PROPERTY_ALIASES.get(shorthand, shorthand)


def resolve_property_tagged(shorthand: str) -> Tuple[str, Resolution]:
    if shorthand in PROPERTY_ALIASES:
        return PROPERTY_ALIASES[shorthand], Resolution.RESOLVED
    return shorthand, Resolution.PASS_THROUGH


def expand_property(canonical: str) -> Tuple[str, ...]:
    """Return the physical properties a canonical property stands for."""
    return COMPOUND_PROPERTIES.get(canonical, (canonical,))
