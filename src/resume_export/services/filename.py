"""Export filename resolution.

Builds a default ``First_Last_Resume_YYYY-MM-DD.ext`` filename and, when
the settings ask for it, lets the user edit it before the export runs.
A cancelled prompt is reported as *None* so callers can abort silently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from resume_export.config import ExportSettings
from resume_export.models import Resume
from resume_export.utils.escaping import sanitize_filename

logger = logging.getLogger(__name__)

__all__ = ["FilenamePrompt", "FilenameResolver", "default_filename", "easygui_filename_prompt"]

# Receives the suggested stem, returns the edited stem or None on cancel.
FilenamePrompt = Callable[[str], "str | None"]


def _default_stem(resume: Resume, today: date) -> str:
    """Return the sanitized default filename without extension."""
    info = resume.content.personal_info
    names = [part.strip() for part in (info.first_name, info.last_name) if part.strip()]
    iso_date = today.isoformat()

    if names:
        base = "_".join([*names, "Resume", iso_date])
    else:
        base = f"{resume.title.strip() or 'Resume'}_{iso_date}"
    return sanitize_filename(base)


def default_filename(resume: Resume, extension: str, today: date | None = None) -> str:
    """Return the default export filename for *resume*.

    Args:
        resume: Resume being exported.
        extension: File extension without the leading dot.
        today: Date stamped into the name (defaults to today).
    """
    return f"{_default_stem(resume, today or date.today())}.{extension}"


def easygui_filename_prompt(suggestion: str) -> str | None:
    """Ask for a filename using a system dialog.

    Args:
        suggestion: Default filename (without extension) shown for editing.

    Returns:
        Entered text, or *None* if the dialog was cancelled.
    """
    import easygui

    return easygui.enterbox(
        msg="Enter a filename for the exported resume",
        title="Export Resume",
        default=suggestion,
    )


class FilenameResolver:
    """Resolve the filename an export is saved under.

    Args:
        prompt: Interactive prompt used when the settings request one.
        today: Callable returning the date stamped into default names.
    """

    def __init__(
        self,
        prompt: FilenamePrompt | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._prompt = prompt or easygui_filename_prompt
        self._today = today

    def resolve(self, resume: Resume, extension: str, settings: ExportSettings) -> str | None:
        """Return the filename to export under, or *None* if cancelled.

        Args:
            resume: Resume being exported.
            extension: File extension without the leading dot.
            settings: Export settings (``prompt_export_filename``).
        """
        stem = _default_stem(resume, self._today())
        if not settings.prompt_export_filename:
            return f"{stem}.{extension}"

        entered = self._prompt(stem)
        if entered is None:
            logger.info("Filename prompt cancelled for resume %s", resume.id)
            return None

        chosen = entered.strip() or stem
        return f"{sanitize_filename(chosen)}.{extension}"
