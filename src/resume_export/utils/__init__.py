"""Utility functions for resume export"""

from resume_export.utils.escaping import escape_latex, escape_markup_text, sanitize_filename

__all__ = ["escape_latex", "escape_markup_text", "sanitize_filename"]
