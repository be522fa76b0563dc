"""Style snapshots of the live resume preview."""

from resume_export.snapshot.engine import DEFAULT_ROOT_ID, StyleSnapshot, StyleSnapshotEngine
from resume_export.snapshot.nodes import TextNode, VisualNode
from resume_export.snapshot.resolver import CascadeStyleResolver, StyleResolver

__all__ = [
    "DEFAULT_ROOT_ID",
    "CascadeStyleResolver",
    "StyleResolver",
    "StyleSnapshot",
    "StyleSnapshotEngine",
    "TextNode",
    "VisualNode",
]
