"""Drive one element's style attributes through resolution into the registry."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from twml.config.factory import TwmlConfig, get_config
from twml.core.registry import DEFAULT_LAYER, RuleRegistry
from twml.core.resolver import expand_property, resolve_property_tagged
from twml.core.rules import DEFAULT_DARK_CLASS, build_rule
from twml.core.types import Diagnostic, GeneratedClass, Resolution
from twml.core.values import resolve_value
from twml.core.variants import lookup_variant, parse_variant
from twml.tokens import NullTokenSource, TokenSource
from twml.utils.logger import get_logger

logger = get_logger(__name__)

Attribute = Tuple[str, str]


@dataclass
class GenerationContext:
    """Mutable state owned by exactly one generation pass."""

    token_source: TokenSource = field(default_factory=NullTokenSource)
    dark_class: str = DEFAULT_DARK_CLASS
    layer_name: str = DEFAULT_LAYER
    registry: RuleRegistry = field(default_factory=RuleRegistry)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_config(
        cls, config: TwmlConfig, token_source: Optional[TokenSource] = None
    ) -> "GenerationContext":
        return cls(
            token_source=token_source or NullTokenSource(),
            dark_class=config.dark_class,
            layer_name=config.layer_name,
        )

    def report(self, generated: GeneratedClass, stage: str, subject: str, resolution: Resolution):
        diagnostic = Diagnostic(generated.name, stage, subject, resolution)
        self.diagnostics.append(diagnostic)
        logger.debug(f"Unresolved token: {diagnostic}")

    def render(self) -> str:
        return self.registry.render(self.layer_name)


class AttributeProcessor:
    """Turns ``(shorthand, value)`` attribute pairs into class names.

    Rules are registered in the context's registry the first time an identity
    is seen during the pass; later occurrences only reuse the class name.
    """

    def process_attribute(
        self, shorthand: str, attribute_value: str, context: GenerationContext
    ) -> List[str]:
        canonical, property_resolution = resolve_property_tagged(shorthand)
        physical = expand_property(canonical)
        class_names = []

        for token in attribute_value.split():
            variant, value = parse_variant(token)
            generated = GeneratedClass(shorthand=shorthand, value=value, variant=variant)
            class_names.append(generated.name)

            if generated.name in context.registry:
                continue

            resolved = resolve_value(physical[0], value, context.token_source)
            rule_text, priority = build_rule(
                generated, physical, resolved.value, variant, dark_class=context.dark_class
            )
            context.registry.register(generated.name, priority, rule_text)

            if property_resolution is not Resolution.RESOLVED:
                context.report(generated, "property", shorthand, property_resolution)
            if variant and lookup_variant(variant) is None:
                context.report(generated, "variant", variant, Resolution.UNRECOGNIZED)
            if resolved.resolution is not Resolution.RESOLVED:
                context.report(generated, "value", value, resolved.resolution)

        return class_names

    def process(
        self, attributes: Iterable[Attribute], context: GenerationContext
    ) -> List[str]:
        """Return the element's class names, first occurrence order, no repeats."""
        seen = set()
        class_names = []
        for shorthand, attribute_value in attributes:
            for name in self.process_attribute(shorthand, attribute_value, context):
                if name not in seen:
                    seen.add(name)
                    class_names.append(name)
        return class_names


def generate_css(
    feed: Sequence[Sequence[Attribute]],
    token_source: Optional[TokenSource] = None,
    config: Optional[TwmlConfig] = None,
) -> Tuple[str, List[List[str]]]:
    """Run one pass over a whole attribute feed.

    Args:
        feed: One sequence of ``(shorthand, value)`` pairs per element
        token_source: Design-token source for color values
        config: Supplies ``dark_class`` and ``layer_name``; loaded when omitted

    Returns:
        The stylesheet text and the class names for each element, in feed order
    """
    context = GenerationContext.from_config(config or get_config(), token_source)
    processor = AttributeProcessor()
    classes = [processor.process(attributes, context) for attributes in feed]
    return context.render(), classes
