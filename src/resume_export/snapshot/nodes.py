"""Visual node tree handed over by the preview renderer.

A minimal element tree: each :class:`VisualNode` has a tag, attributes,
declared inline style and children (elements or :class:`TextNode`).  It
serializes to HTML with every text and attribute value escaped.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from markupsafe import escape

__all__ = ["TextNode", "VisualNode"]

# Elements serialized without a closing tag.
_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


@dataclass(eq=False, slots=True)
class TextNode:
    """A run of character data."""

    text: str
    parent: VisualNode | None = field(default=None, repr=False)

    def clone(self) -> TextNode:
        return TextNode(self.text)

    def serialize(self) -> str:
        return str(escape(self.text))


@dataclass(eq=False, slots=True)
class VisualNode:
    """A rendered element.

    Attributes:
        tag: Lower-case element name (``div``, ``svg``, ``path`` ...).
        attributes: Plain attributes other than ``style``.
        style: Declared inline style, property name → value.
        children: Child elements and text runs, in document order.
        parent: Containing element, maintained by :meth:`append`.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)
    children: list[VisualNode | TextNode] = field(default_factory=list)
    parent: VisualNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.tag = self.tag.lower()
        for child in self.children:
            child.parent = self

    # ------------------------------------------------------------------
    # tree editing
    # ------------------------------------------------------------------

    def append(self, child: VisualNode | TextNode) -> VisualNode | TextNode:
        """Attach *child* as the last child and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: VisualNode | TextNode) -> None:
        """Detach *child* from this node."""
        self.children.remove(child)
        child.parent = None

    def detach(self) -> None:
        """Remove this node from its parent, if any."""
        if self.parent is not None:
            self.parent.remove(self)

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @property
    def classes(self) -> list[str]:
        return self.attributes.get("class", "").split()

    def iter_elements(self) -> Iterator[VisualNode]:
        """Yield this node and every descendant element in document order."""
        yield self
        for child in self.children:
            if isinstance(child, VisualNode):
                yield from child.iter_elements()

    def find_by_id(self, element_id: str) -> VisualNode | None:
        for node in self.iter_elements():
            if node.attributes.get("id") == element_id:
                return node
        return None

    def ancestors(self) -> Iterator[VisualNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    # ------------------------------------------------------------------
    # serialization
    # ------------------------------------------------------------------

    def _open_tag(self) -> str:
        parts = [self.tag]
        for name, value in self.attributes.items():
            parts.append(f'{name}="{escape(value)}"')
        if self.style:
            declarations = "; ".join(f"{name}: {value}" for name, value in self.style.items())
            parts.append(f'style="{escape(declarations)}"')
        return f"<{' '.join(parts)}>"

    @property
    def inner_markup(self) -> str:
        return "".join(child.serialize() for child in self.children)

    @property
    def outer_markup(self) -> str:
        return self.serialize()

    def serialize(self) -> str:
        if self.tag in _VOID_TAGS:
            return self._open_tag()
        return f"{self._open_tag()}{self.inner_markup}</{self.tag}>"
