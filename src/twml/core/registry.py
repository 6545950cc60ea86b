"""Per-pass rule registry: at most one rule per class identity."""

from typing import Dict, Iterator, List

from twml.core.types import CssRule

DEFAULT_LAYER = "utilities"


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[str, CssRule] = {}

    def __contains__(self, identity: str) -> bool:
        return identity in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[CssRule]:
        return iter(self._rules.values())

    def register(self, identity: str, priority: int, rule_text: str) -> bool:
        """Record a rule unless the identity is already known.

        Returns True when the rule was added.
        """
        if identity in self._rules:
            return False
        self._rules[identity] = CssRule(identity=identity, priority=priority, text=rule_text)
        return True

    def finalize(self) -> List[str]:
        """Rule texts by ascending priority, document order within a priority."""
        return [rule.text for rule in sorted(self._rules.values(), key=lambda rule: rule.priority)]

    def render(self, layer: str = DEFAULT_LAYER) -> str:
        rules = self.finalize()
        if not rules:
            return ""
        body = "\n\n".join(rules)
        return f"@layer {layer} {{\n{body}\n}}"
