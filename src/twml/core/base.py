# twml/core/base.py

# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Local/package imports
from twml.config.factory import TwmlConfig, get_config
from twml.core.processor import Attribute, AttributeProcessor, GenerationContext
from twml.core.types import Diagnostic
from twml.document import Document
from twml.scheduler import RegenerationScheduler
from twml.tokens import NullTokenSource, TokenSource
from twml.utils.logger import get_logger, set_level


@dataclass
class GenerationResult:
    css: str
    classes: List[Tuple[Any, List[str]]] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def class_names(self) -> List[List[str]]:
        return [names for _, names in self.classes]


class StyleGenerator:
    """Runs full generation passes over a live document.

    Attributes consumed from an element are remembered in a feed ledger, so a
    later pass re-derives the complete stylesheet even after the attributes
    were stripped from the markup.
    """

    def __init__(
        self,
        config: Optional[TwmlConfig] = None,
        token_source: Optional[TokenSource] = None,
    ):
        self.config = config or get_config()
        set_level(self.config.effective_log_level)
        self.token_source = token_source
        self.processor = AttributeProcessor()
        self.logger = get_logger(__name__)
        self._ledger: Dict[int, Tuple[Any, List[Attribute]]] = {}

    def _consume(self, document: Document, element: Any) -> None:
        """Move an element's prefixed attributes into the ledger."""
        prefix = self.config.attribute_prefix
        discovered = [
            (name, value)
            for name, value in document.attributes(element)
            if name.startswith(prefix) and len(name) > len(prefix)
        ]
        entry = self._ledger.get(id(element))
        if entry is not None and entry[0] is not element:
            entry = None

        if not self.config.strip_attributes:
            # Unstripped markup is the source of truth.
            if discovered:
                self._ledger[id(element)] = (
                    element,
                    [(name[len(prefix) :], value) for name, value in discovered],
                )
            elif entry is not None:
                del self._ledger[id(element)]
            return

        if not discovered:
            return
        if entry is None:
            entry = (element, [])
            self._ledger[id(element)] = entry
        attributes = entry[1]

        for name, value in discovered:
            shorthand = name[len(prefix) :]
            for idx, (known, _) in enumerate(attributes):
                if known == shorthand:
                    attributes[idx] = (shorthand, value)
                    break
            else:
                attributes.append((shorthand, value))
            document.remove_attribute(element, name)

    def _feed(self, document: Document) -> List[Tuple[Any, List[Attribute]]]:
        """Ledger entries for elements still in the document, in document order."""
        feed = []
        for element in document.elements():
            self._consume(document, element)
            entry = self._ledger.get(id(element))
            if entry is not None and entry[0] is element:
                feed.append(entry)

        live = {id(element) for element, _ in feed}
        dropped = len(self._ledger) - len(live)
        if dropped:
            self.logger.debug(f"Forgetting {dropped} element(s) no longer in the document")
            self._ledger = {key: entry for key, entry in self._ledger.items() if key in live}
        return feed

    def _token_source(self, document: Document) -> TokenSource:
        if self.token_source is not None:
            return self.token_source
        source = getattr(document, "token_source", lambda: None)()
        return source or NullTokenSource()

    def generate(self, document: Document) -> GenerationResult:
        """Run one full pass and attach class names to their elements."""
        feed = self._feed(document)
        if not feed:
            self.logger.debug("No styled elements found")
            return GenerationResult(css="")

        context = GenerationContext.from_config(self.config, self._token_source(document))
        classes = []
        for element, attributes in feed:
            names = self.processor.process(attributes, context)
            document.add_classes(element, names)
            classes.append((element, names))

        css = context.render()
        self.logger.info(
            f"Generated {len(context.registry)} rules for {len(feed)} elements"
        )
        if context.diagnostics:
            self.logger.debug(f"{len(context.diagnostics)} token(s) passed through unresolved")
        return GenerationResult(css=css, classes=classes, diagnostics=context.diagnostics)

    def inject(self, document: Document, css: str) -> None:
        """Replace the previously injected stylesheet with ``css``."""
        document.replace_stylesheet(self.config.style_element_id, css)

    def init(self, document: Document) -> str:
        """Generate and inject; returns the stylesheet text."""
        css = self.generate(document).css
        if css:
            self.inject(document, css)
        return css

    def scheduler(self, document: Document) -> RegenerationScheduler:
        return RegenerationScheduler(
            lambda: self.init(document),
            debounce_seconds=self.config.debounce_seconds,
        )
