"""Static table of style properties baked into a snapshot.

Each :class:`StyleProperty` names a CSS property, the nodes it applies to
and a normalizer that turns a resolved value into the value written on the
clone (or *None* to skip it).  The table is evaluated as-is: there is no
runtime probing of which properties a renderer accepts.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from PIL import ImageColor

from resume_export.snapshot.nodes import VisualNode

__all__ = [
    "NOOP_VALUES",
    "STYLE_PROPERTIES",
    "SVG_TAGS",
    "StyleProperty",
    "in_vector_icon",
    "is_noop",
    "to_hex_color",
]

# Resolved values that restate a default and are left off the clone.
NOOP_VALUES = frozenset(
    {"", "none", "normal", "auto", "0", "0px", "transparent", "rgba(0, 0, 0, 0)", "rgba(0,0,0,0)"}
)

SVG_TAGS = frozenset(
    {
        "svg",
        "g",
        "path",
        "circle",
        "ellipse",
        "line",
        "polyline",
        "polygon",
        "rect",
        "use",
        "defs",
        "symbol",
    }
)

_RGBA = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*(?:[,/]\s*([\d.]+%?)\s*)?\)$"
)


def is_noop(value: str | None) -> bool:
    return value is None or value.strip().lower() in NOOP_VALUES


def to_hex_color(value: str) -> str | None:
    """Normalize any CSS color notation to ``#rrggbb``.

    Returns *None* for fully transparent or unparsable colors.
    """
    text = value.strip().lower()
    match = _RGBA.match(text)
    if match:
        red, green, blue, alpha = match.groups()
        if alpha is not None:
            opacity = float(alpha[:-1]) / 100 if alpha.endswith("%") else float(alpha)
            if opacity == 0:
                return None
        channels = [min(255, round(float(c))) for c in (red, green, blue)]
        return "#{:02x}{:02x}{:02x}".format(*channels)
    try:
        rgb = ImageColor.getrgb(text)
    except ValueError:
        return None
    if len(rgb) == 4 and rgb[3] == 0:
        return None
    return "#{:02x}{:02x}{:02x}".format(*rgb[:3])


def _verbatim(value: str) -> str | None:
    return value.strip()


def _color(value: str) -> str | None:
    return to_hex_color(value)


def _background_image(value: str) -> str | None:
    # Gradients and urls survive; anything else is dropped.
    value = value.strip()
    return value if ("gradient(" in value or value.startswith("url(")) else None


def _any_node(node: VisualNode) -> bool:
    return True


def _html_node(node: VisualNode) -> bool:
    return node.tag not in SVG_TAGS


def _list_node(node: VisualNode) -> bool:
    return node.tag in {"ul", "ol", "li"}


def in_vector_icon(node: VisualNode) -> bool:
    """True for an ``svg`` element or anything nested in one."""
    return node.tag == "svg" or any(a.tag == "svg" for a in node.ancestors())


@dataclass(frozen=True, slots=True)
class StyleProperty:
    """One entry of the style allow-list.

    Attributes:
        name: CSS property name.
        applies: Predicate deciding whether the property is captured for a node.
        normalize: Maps a resolved value to the baked value, or *None* to skip.
    """

    name: str
    applies: Callable[[VisualNode], bool] = _any_node
    normalize: Callable[[str], str | None] = _verbatim


def _props(
    names: str,
    applies: Callable[[VisualNode], bool] = _any_node,
    normalize: Callable[[str], str | None] = _verbatim,
) -> list[StyleProperty]:
    return [StyleProperty(name, applies, normalize) for name in names.split()]


STYLE_PROPERTIES: tuple[StyleProperty, ...] = tuple(
    # color and background
    _props("color background-color border-color", normalize=_color)
    + _props("background-image", _html_node, _background_image)
    + _props("opacity")
    # typography
    + _props(
        "font-family font-size font-weight font-style line-height letter-spacing "
        "text-align text-transform text-decoration white-space word-break"
    )
    # box model
    + _props(
        "width height min-width max-width min-height max-height "
        "margin-top margin-right margin-bottom margin-left "
        "padding-top padding-right padding-bottom padding-left box-sizing",
        _html_node,
    )
    # borders
    + _props(
        "border-top-width border-right-width border-bottom-width border-left-width "
        "border-top-style border-right-style border-bottom-style border-left-style "
        "border-radius",
        _html_node,
    )
    + _props(
        "border-top-color border-right-color border-bottom-color border-left-color",
        _html_node,
        _color,
    )
    # layout
    + _props("display position top right bottom left overflow vertical-align", _html_node)
    # flex and grid
    + _props(
        "flex-direction flex-wrap flex-grow flex-shrink flex-basis justify-content "
        "align-items align-self gap row-gap column-gap grid-template-columns grid-column",
        _html_node,
    )
    # list style
    + _props("list-style-type list-style-position", _list_node)
)
