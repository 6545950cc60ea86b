"""Design-token sources answering "is ``--color-<token>`` defined?"."""

from __future__ import annotations

from typing import Dict, Iterable, Protocol

import tinycss2

COLOR_PREFIX = "color-"
# Selectors whose custom properties resolve on the document element.
ROOT_SELECTORS = frozenset([":root", "html"])


class TokenSource(Protocol):
    def has_color(self, token: str) -> bool: ...


class NullTokenSource:
    """No design-system colors; every color token passes through."""

    def has_color(self, token: str) -> bool:
        return False


class StaticTokenSource:
    def __init__(self, colors: Iterable[str] = ()):
        self.colors = frozenset(colors)

    def has_color(self, token: str) -> bool:
        return token in self.colors


def _custom_properties(declarations, variables: Dict[str, str]) -> None:
    for declaration in declarations:
        if declaration.type != "declaration" or not declaration.name.startswith("--"):
            continue
        variables[declaration.name[2:]] = tinycss2.serialize(declaration.value).strip()


def _is_root_rule(rule) -> bool:
    selectors = tinycss2.serialize(rule.prelude).split(",")
    return any(selector.strip().lower() in ROOT_SELECTORS for selector in selectors)


def _harvest_rules(rules, variables: Dict[str, str]) -> None:
    for rule in rules:
        if rule.type == "qualified-rule" and _is_root_rule(rule):
            _custom_properties(
                tinycss2.parse_declaration_list(rule.content, skip_comments=True, skip_whitespace=True),
                variables,
            )
        elif rule.type == "at-rule" and rule.lower_at_keyword == "layer" and rule.content is not None:
            _harvest_rules(
                tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True),
                variables,
            )


class CssVariableTokenSource:
    """Custom properties declared on the document root, later declarations winning.

    Only ``:root`` and ``html`` rules (also inside ``@layer`` blocks) and the
    root element's inline style count; variables scoped to other selectors do
    not resolve on the root element.
    """

    def __init__(self, variables: Dict[str, str] | None = None):
        self.variables: Dict[str, str] = dict(variables or {})

    @classmethod
    def from_css(cls, *css_texts: str) -> "CssVariableTokenSource":
        variables: Dict[str, str] = {}
        for text in css_texts:
            _harvest_rules(
                tinycss2.parse_stylesheet(text or "", skip_comments=True, skip_whitespace=True),
                variables,
            )
        return cls(variables)

    def update_from_declarations(self, style_text: str) -> None:
        """Apply an inline ``style`` attribute of the root element."""
        _custom_properties(
            tinycss2.parse_declaration_list(style_text or "", skip_comments=True, skip_whitespace=True),
            self.variables,
        )

    def get(self, name: str) -> str:
        return self.variables.get(name[2:] if name.startswith("--") else name, "")

    def has_color(self, token: str) -> bool:
        return self.get(COLOR_PREFIX + token) != ""

    def __len__(self) -> int:
        return len(self.variables)
