# twml/html_document.py
"""BeautifulSoup-backed document adapter."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from twml.document import AttributeChange
from twml.tokens import CssVariableTokenSource
from twml.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PARSER = "html.parser"


def _attribute_text(value) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


def has_prefixed_attribute(tag: Tag, prefix: str) -> bool:
    return any(name.startswith(prefix) for name in tag.attrs)


class HtmlDocument:
    def __init__(self, markup, parser: str = DEFAULT_PARSER):
        if isinstance(markup, BeautifulSoup):
            self.soup = markup
        else:
            self.soup = BeautifulSoup(markup, parser)

    def elements(self) -> List[Tag]:
        return self.soup.find_all(True)

    def attributes(self, element: Tag) -> List[Tuple[str, str]]:
        return [(name, _attribute_text(value)) for name, value in element.attrs.items()]

    def remove_attribute(self, element: Tag, name: str) -> None:
        if name in element.attrs:
            del element[name]

    def add_classes(self, element: Tag, classes: Sequence[str]) -> None:
        existing = element.get("class") or []
        if isinstance(existing, str):
            existing = existing.split()
        merged = list(existing)
        for name in classes:
            if name not in merged:
                merged.append(name)
        if merged:
            element["class"] = merged

    def _head(self) -> Tag:
        if self.soup.head is not None:
            return self.soup.head
        head = self.soup.new_tag("head")
        if self.soup.html is not None:
            self.soup.html.insert(0, head)
        else:
            self.soup.insert(0, head)
        return head

    def stylesheet(self, style_id: str) -> Optional[Tag]:
        return self.soup.find("style", attrs={"id": style_id})

    def replace_stylesheet(self, style_id: str, css: str) -> None:
        """Drop any stylesheet previously injected under ``style_id`` and add ``css``."""
        for existing in self.soup.find_all("style", attrs={"id": style_id}):
            existing.decompose()
        style = self.soup.new_tag("style", attrs={"id": style_id})
        style.string = css
        self._head().append(style)
        logger.debug(f"Injected stylesheet #{style_id} ({len(css)} chars)")

    def token_source(self) -> CssVariableTokenSource:
        """Custom properties declared in ``<style>`` blocks and on the root element."""
        source = CssVariableTokenSource.from_css(
            *(style.get_text() for style in self.soup.find_all("style"))
        )
        if self.soup.html is not None and self.soup.html.get("style"):
            source.update_from_declarations(self.soup.html["style"])
        return source

    def change_for(self, nodes: Iterable, prefix: str) -> AttributeChange:
        """Describe a batch of added nodes as a scheduler message."""
        for node in nodes:
            if not isinstance(node, Tag):
                continue
            if has_prefixed_attribute(node, prefix) or any(
                has_prefixed_attribute(child, prefix) for child in node.find_all(True)
            ):
                return AttributeChange(True, reason=f"<{node.name}> added")
        return AttributeChange(False, reason="no styled nodes added")

    def __str__(self) -> str:
        return str(self.soup)
