"""Style snapshot capture.

Turns the live preview subtree into a portable clone: interactive chrome
is stripped, every allow-listed effective style is baked onto the clone as
an inline override, and vector icons get their geometry and paint copied
onto plain attributes so they render without any stylesheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resume_export.snapshot.nodes import TextNode, VisualNode
from resume_export.snapshot.properties import (
    STYLE_PROPERTIES,
    in_vector_icon,
    is_noop,
    to_hex_color,
)
from resume_export.snapshot.resolver import CascadeStyleResolver, StyleResolver

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_ROOT_ID", "StyleSnapshot", "StyleSnapshotEngine"]

DEFAULT_ROOT_ID = "resume-preview"

_PRINT_EXCLUDE_CLASSES = frozenset({"print:hidden", "no-print"})
_ICON_SIZE_PROPERTIES = ("width", "height")
_ICON_PAINT_PROPERTIES = ("stroke", "fill")
_ICON_VERBATIM_PROPERTIES = ("stroke-width", "stroke-linecap", "stroke-linejoin")
_ICON_PROPERTIES = (
    *_ICON_SIZE_PROPERTIES,
    *_ICON_PAINT_PROPERTIES,
    *_ICON_VERBATIM_PROPERTIES,
    "color",
)


@dataclass(slots=True)
class StyleSnapshot:
    """A self-contained clone of the preview with styles baked in.

    Attributes:
        root: The cloned export root (mounted by the raster path).
    """

    root: VisualNode

    @property
    def markup(self) -> str:
        """Serialized clone, consumed by the HTML encoder."""
        return self.root.outer_markup


def _is_interactive(node: VisualNode) -> bool:
    """True for UI chrome that must not appear in exported documents."""
    if node.tag == "button" or node.attributes.get("role") == "button":
        return True
    if "data-print-exclude" in node.attributes:
        return True
    return any(cls in _PRINT_EXCLUDE_CLASSES for cls in node.classes)


def _deep_clone(
    source: VisualNode, pairs: list[tuple[VisualNode, VisualNode]]
) -> VisualNode:
    """Clone *source* recursively, recording ``(clone, source)`` pairs."""
    clone = VisualNode(
        source.tag,
        attributes=dict(source.attributes),
        style=dict(source.style),
    )
    pairs.append((clone, source))
    for child in source.children:
        if isinstance(child, TextNode):
            clone.append(child.clone())
        else:
            clone.append(_deep_clone(child, pairs))
    return clone


def _strip_interactive(root: VisualNode) -> int:
    """Remove interactive nodes below *root*; return how many were removed."""
    doomed = [node for node in root.iter_elements() if node is not root and _is_interactive(node)]
    for node in doomed:
        node.detach()
    return len(doomed)


class StyleSnapshotEngine:
    """Capture :class:`StyleSnapshot` objects from a live visual tree.

    Args:
        resolver: Source of effective styles for live nodes.
    """

    def __init__(self, resolver: StyleResolver | None = None) -> None:
        self._resolver = resolver or CascadeStyleResolver()

    def capture(
        self, tree: VisualNode | None, root_id: str = DEFAULT_ROOT_ID
    ) -> StyleSnapshot | None:
        """Snapshot the export root found in *tree*.

        Args:
            tree: Live visual tree, or *None* when no preview is rendered.
            root_id: ``id`` attribute of the export root.

        Returns:
            The snapshot, or *None* if the export root is not present.
        """
        source = self._locate_root(tree, root_id)
        if source is None:
            logger.debug("Export root %r not found in visual tree", root_id)
            return None

        pairs: list[tuple[VisualNode, VisualNode]] = []
        clone = _deep_clone(source, pairs)
        removed = _strip_interactive(clone)

        attached = {id(node) for node in clone.iter_elements()}
        for clone_node, live_node in pairs:
            if id(clone_node) not in attached:
                continue
            self._bake_styles(clone_node, live_node)
            if in_vector_icon(live_node):
                self._bake_icon(clone_node, live_node)

        logger.debug(
            "Captured snapshot of %d nodes (%d interactive removed)", len(attached), removed
        )
        return StyleSnapshot(root=clone)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _locate_root(tree: VisualNode | None, root_id: str) -> VisualNode | None:
        if tree is None:
            return None
        found = tree.find_by_id(root_id)
        if found is not None:
            return found
        return next(
            (node for node in tree.iter_elements() if "data-export-root" in node.attributes),
            None,
        )

    def _bake_styles(self, clone: VisualNode, live: VisualNode) -> None:
        applicable = [prop for prop in STYLE_PROPERTIES if prop.applies(live)]
        resolved = self._resolver.resolve(live, [prop.name for prop in applicable])
        for prop in applicable:
            raw = resolved.get(prop.name)
            if is_noop(raw):
                continue
            value = prop.normalize(raw)
            if value is not None and not is_noop(value):
                clone.style[prop.name] = value

    def _bake_icon(self, clone: VisualNode, live: VisualNode) -> None:
        resolved = self._resolver.resolve(live, _ICON_PROPERTIES)

        for name in _ICON_SIZE_PROPERTIES:
            value = resolved.get(name)
            if is_noop(value):
                continue
            clone.style[name] = value
            clone.attributes[name] = value

        for name in _ICON_PAINT_PROPERTIES:
            value = resolved.get(name)
            if is_noop(value):
                continue
            if value.strip().lower() == "currentcolor":
                value = resolved.get("color", "")
            color = to_hex_color(value)
            if color is not None:
                clone.attributes[name] = color

        for name in _ICON_VERBATIM_PROPERTIES:
            value = resolved.get(name)
            if value is not None and value.strip():
                clone.attributes[name] = value.strip()
