# twml/core/types.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

CSS_SPECIAL = re.compile(r"([:/\.\[\]\(\)'%#,!*+~>@])")

# A single value shared by every physical property, or explicit declarations.
CssValue = Union[str, Mapping[str, str]]


def escape(class_name: str) -> str:
    """Backslash-escape characters that are not allowed bare in a class selector."""
    return CSS_SPECIAL.sub(r"\\\1", class_name)


class Resolution(Enum):
    RESOLVED = "resolved"
    PASS_THROUGH = "pass-through"
    UNRECOGNIZED = "unrecognized"


class ValueKind(Enum):
    NUMERIC_LITERAL = "numeric"
    UNIT_VALUE = "unit"
    COLOR_TOKEN = "color"
    RAW_LITERAL = "raw"


class VariantKind(Enum):
    BREAKPOINT = "breakpoint"
    PSEUDO_STATE = "pseudo-state"
    THEME = "theme"


@dataclass(frozen=True)
class Variant:
    """A closed-set qualifier with its fixed rendering rule and priority."""

    name: str
    kind: VariantKind
    priority: int
    min_width: Optional[str] = None


@dataclass(frozen=True)
class GeneratedClass:
    """Canonical identity of one utility: (variant, shorthand, value)."""

    shorthand: str
    value: str
    variant: Optional[str] = None

    @property
    def name(self) -> str:
        base = f"{self.shorthand}-{self.value}"
        if self.variant:
            return f"{self.variant}:{base}"
        return base

    @property
    def selector(self) -> str:
        return "." + escape(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ResolvedValue:
    value: CssValue
    kind: ValueKind
    resolution: Resolution


@dataclass(frozen=True)
class CssRule:
    identity: str
    priority: int
    text: str


@dataclass(frozen=True)
class Diagnostic:
    """A fallback taken while resolving one token; rendering is unaffected."""

    class_name: str
    stage: str
    subject: str
    resolution: Resolution

    def __str__(self) -> str:
        return f"{self.class_name}: {self.stage} {self.subject!r} {self.resolution.value}"
