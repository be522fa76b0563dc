"""String escaping and filename sanitization helpers."""

from __future__ import annotations

import re

from markupsafe import escape

__all__ = ["escape_latex", "escape_markup_text", "sanitize_filename"]

# Characters that have special meaning in LaTeX, mapped per character so
# replacements are never re-escaped.
_LATEX_REPLACEMENTS = str.maketrans(
    {
        "\\": r"\textbackslash{}",
        "{": r"\{",
        "}": r"\}",
        "$": r"\$",
        "&": r"\&",
        "%": r"\%",
        "#": r"\#",
        "^": r"\textasciicircum{}",
        "_": r"\_",
        "~": r"\textasciitilde{}",
    }
)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_UNDERSCORE_RUNS = re.compile(r"_{2,}")


def escape_latex(text: str | None) -> str:
    r"""Escape LaTeX special characters in *text*.

    Handles: ``\ { } $ & % # ^ _ ~``.  All other characters, Unicode
    included, pass through unchanged.
    """
    if not text:
        return ""
    return text.translate(_LATEX_REPLACEMENTS)


def sanitize_filename(name: str) -> str:
    """Replace characters outside ``[A-Za-z0-9_-]`` and collapse underscores."""
    sanitized = _UNSAFE_FILENAME_CHARS.sub("_", name)
    return _UNDERSCORE_RUNS.sub("_", sanitized)


def escape_markup_text(text: str | None) -> str:
    """Escape *text* for use as an HTML text node or attribute value."""
    if not text:
        return ""
    return str(escape(text))
