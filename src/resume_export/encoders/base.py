"""Abstract base class for resume export encoders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from resume_export.models import NameOrder, SkillLevel

if TYPE_CHECKING:
    from resume_export.models import (
        Education,
        Experience,
        ExportFormat,
        PersonalInfo,
        Resume,
        SkillEntry,
        Skills,
    )
    from resume_export.snapshot import StyleSnapshot

__all__ = ["SKILL_CATEGORIES", "ResumeEncoder"]

# Fixed display order and labels of the skill categories.
SKILL_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("technical", "Technical"),
    ("languages", "Languages"),
    ("tools", "Tools"),
    ("soft", "Soft Skills"),
)


class ResumeEncoder(ABC):
    """Interface that every export encoder must implement."""

    @property
    @abstractmethod
    def format_id(self) -> ExportFormat:
        """Export format produced by this encoder."""

    @abstractmethod
    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> str | bytes:
        """Encode *resume* into this encoder's output format."""

    async def encode_async(
        self, resume: Resume, snapshot: StyleSnapshot | None = None
    ) -> str | bytes:
        """Awaitable variant of :meth:`encode` used by the coordinator."""
        return self.encode(resume, snapshot)

    # ------------------------------------------------------------------
    # Shared helpers available to all encoders
    # ------------------------------------------------------------------

    @staticmethod
    def clean(value: str | None) -> str:
        """Return *value* stripped, treating *None* as empty."""
        return (value or "").strip()

    @staticmethod
    def display_name(info: PersonalInfo) -> str:
        """Assemble the display name according to ``name_order``.

        ``firstLast`` gives ``"First Last"``, ``lastFirst`` gives
        ``"Last, First"``; a single available name is returned alone.
        """
        first = info.first_name.strip()
        last = info.last_name.strip()
        if first and last:
            if info.name_order == NameOrder.LAST_FIRST:
                return f"{last}, {first}"
            return f"{first} {last}"
        return first or last

    @staticmethod
    def contact_parts(info: PersonalInfo) -> list[str]:
        """Non-empty contact fields in header order."""
        return [v.strip() for v in (info.email, info.phone, info.location) if v.strip()]

    @staticmethod
    def skill_name(entry: SkillEntry) -> str:
        """Display name of a skill entry; levels are never shown."""
        if isinstance(entry, SkillLevel):
            return entry.name.strip()
        return entry.strip()

    @classmethod
    def skill_lines(cls, skills: Skills) -> list[tuple[str, str]]:
        """``(Category, "a, b")`` pairs for every non-empty category."""
        lines: list[tuple[str, str]] = []
        for attr, label in SKILL_CATEGORIES:
            names = [name for name in map(cls.skill_name, getattr(skills, attr)) if name]
            if names:
                lines.append((label, ", ".join(names)))
        return lines

    @staticmethod
    def format_date_range(start: str | None, end: str | None, is_current: bool = False) -> str:
        """Return ``"{start} - {end}"`` with ``Present`` for current entries.

        The stored end date is ignored when *is_current* is set.
        """
        start_str = (start or "").strip()
        end_str = "Present" if is_current else (end or "").strip()

        if start_str and end_str:
            return f"{start_str} - {end_str}"
        return start_str or end_str

    @classmethod
    def entry_dates(cls, entry: Experience | Education) -> str:
        """Date range of an entry built from its ``effective_end_date``."""
        return cls.format_date_range(entry.start_date, entry.effective_end_date, entry.current)

    @staticmethod
    def degree_line(degree: str, field: str) -> str:
        """``"Degree in Field"`` with either part optional."""
        degree = degree.strip()
        field = field.strip()
        if degree and field:
            return f"{degree} in {field}"
        return degree or field

    @staticmethod
    def clean_list(values: list[str]) -> list[str]:
        """Drop empty and whitespace-only strings."""
        return [v.strip() for v in values if v and v.strip()]
