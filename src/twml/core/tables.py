"""Static lookup tables shared by every generation pass."""

from types import MappingProxyType
from typing import Mapping, Tuple

SPACING_VARIABLE = "--spacing"

PROPERTY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "w": "width",
        "h": "height",
        "max-w": "max-width",
        "max-h": "max-height",
        "min-w": "min-width",
        "min-h": "min-height",
        "p": "padding",
        "px": "padding-x",
        "py": "padding-y",
        "pt": "padding-top",
        "pr": "padding-right",
        "pb": "padding-bottom",
        "pl": "padding-left",
        "m": "margin",
        "mx": "margin-x",
        "my": "margin-y",
        "mt": "margin-top",
        "mr": "margin-right",
        "mb": "margin-bottom",
        "ml": "margin-left",
        "bg": "background-color",
        "text": "color",
        "rounded": "border-radius",
        "fs": "font-size",
        "fw": "font-weight",
        "aspect": "aspect-ratio",
        "cols": "grid-template-columns",
        "z": "z-index",
    }
)

# Logical properties and their physical longhands, left/right and top/bottom.
COMPOUND_PROPERTIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "padding-x": ("padding-left", "padding-right"),
        "padding-y": ("padding-top", "padding-bottom"),
        "margin-x": ("margin-left", "margin-right"),
        "margin-y": ("margin-top", "margin-bottom"),
    }
)

PREDEFINED_VALUES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "aspect-ratio": MappingProxyType(
            {
                "square": "1 / 1",
                "video": "16 / 9",
                "portrait": "3 / 4",
                "landscape": "4 / 3",
            }
        ),
        "font-weight": MappingProxyType(
            {
                "thin": "100",
                "light": "300",
                "normal": "400",
                "medium": "500",
                "semibold": "600",
                "bold": "700",
                "black": "900",
            }
        ),
    }
)

FONT_SIZE_TOKENS = frozenset(
    ["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl"]
)

COLOR_PROPERTIES = frozenset(["color", "background-color", "border-color"])

SPACING_PROPERTIES = frozenset(
    [
        "width",
        "height",
        "max-width",
        "max-height",
        "min-width",
        "min-height",
        "padding",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "margin",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "gap",
        "border-radius",
        "top",
        "right",
        "bottom",
        "left",
    ]
)
