"""Style resolution capability used by the snapshot engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from resume_export.snapshot.nodes import VisualNode

__all__ = ["INHERITED_PROPERTIES", "CascadeStyleResolver", "StyleResolver"]

# CSS properties whose value flows from parent to child when unset.
INHERITED_PROPERTIES = frozenset(
    {
        "color",
        "font-family",
        "font-size",
        "font-style",
        "font-weight",
        "letter-spacing",
        "line-height",
        "list-style-position",
        "list-style-type",
        "text-align",
        "text-transform",
        "white-space",
        "word-break",
        "fill",
        "stroke",
        "stroke-width",
        "stroke-linecap",
        "stroke-linejoin",
    }
)


class StyleResolver(Protocol):
    """Anything that can report the effective style of a live node."""

    def resolve(self, node: VisualNode, properties: Iterable[str]) -> Mapping[str, str]:
        """Return effective values for *properties* on *node*.

        Properties without a resolved value may be missing from the result.
        """
        ...


class CascadeStyleResolver:
    """Resolve styles from declared inline styles plus inheritance.

    A node's own declaration wins; inherited properties fall back to the
    nearest ancestor declaring them.  Nothing else of the CSS cascade is
    modelled, so renderers with real computed styles should supply their
    own :class:`StyleResolver`.
    """

    def resolve(self, node: VisualNode, properties: Iterable[str]) -> Mapping[str, str]:
        resolved: dict[str, str] = {}
        for name in properties:
            value = node.style.get(name)
            if value is None and name in INHERITED_PROPERTIES:
                value = next(
                    (a.style[name] for a in node.ancestors() if name in a.style),
                    None,
                )
            if value is not None:
                resolved[name] = value
        return resolved
