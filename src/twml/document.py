"""Collaborator interfaces between the generator and a live document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Protocol, Sequence, Tuple


class Document(Protocol):
    """A live element tree the generator reads attributes from and writes to."""

    def elements(self) -> Iterable[Any]:
        """Every element, in document order."""
        ...

    def attributes(self, element: Any) -> List[Tuple[str, str]]: ...

    def remove_attribute(self, element: Any, name: str) -> None: ...

    def add_classes(self, element: Any, classes: Sequence[str]) -> None: ...

    def replace_stylesheet(self, style_id: str, css: str) -> None: ...


@dataclass(frozen=True)
class AttributeChange:
    """A "the attribute set may have changed" message for the scheduler."""

    has_styled_attributes: bool = True
    reason: str = ""
