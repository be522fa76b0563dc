"""Shared layout for the line-oriented encoders (Markdown, plain text).

Both formats emit the same blocks in the same order and differ only in
heading syntax, bullet glyph and how consecutive detail lines are joined.
Blocks are separated by one blank line and the output ends with one.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from resume_export.encoders.base import ResumeEncoder

if TYPE_CHECKING:
    from resume_export.models import (
        Certification,
        Education,
        Experience,
        Link,
        Resume,
        ResumeContent,
    )
    from resume_export.snapshot import StyleSnapshot

__all__ = ["TextDocumentEncoder"]


class TextDocumentEncoder(ResumeEncoder):
    """Base class for encoders producing a sequence of text blocks."""

    bullet: str = "-"

    # ------------------------------------------------------------------
    # format hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def heading(self, text: str, level: int) -> str:
        """Render a heading; level 1 is the name, 2 a section, 3 an entry."""

    @abstractmethod
    def details(self, lines: list[str]) -> str:
        """Join consecutive detail lines of one entry into a block."""

    @abstractmethod
    def link(self, label: str, url: str) -> str:
        """Render a labelled link."""

    def free_text(self, value: str) -> str:
        """Prepare user-written prose (summary, description, highlights)."""
        return value

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> str:
        blocks = self.build_blocks(resume.content)
        return "".join(f"{block}\n\n" for block in blocks)

    def build_blocks(self, content: ResumeContent) -> list[str]:
        blocks: list[str] = []
        info = content.personal_info

        name = self.display_name(info)
        if name:
            blocks.append(self.heading(name, 1))
        contact = self.contact_parts(info)
        if contact:
            blocks.append(" | ".join(contact))

        summary = self.clean(info.summary)
        if summary:
            blocks.append(self.heading("Summary", 2))
            blocks.append(self.free_text(summary))

        if content.experience:
            blocks.append(self.heading("Experience", 2))
            for entry in content.experience:
                blocks.extend(self._experience(entry))

        if content.education:
            blocks.append(self.heading("Education", 2))
            for entry in content.education:
                blocks.extend(self._education(entry))

        skill_lines = self.skill_lines(content.skills)
        if skill_lines:
            blocks.append(self.heading("Skills", 2))
            blocks.append(
                self._bullets(f"{label}: {names}" for label, names in skill_lines)
            )

        if content.certifications:
            blocks.append(self.heading("Certifications", 2))
            for cert in content.certifications:
                blocks.extend(self._certification(cert))

        links = [link for link in content.links if self.clean(link.url)]
        if links:
            blocks.append(self.heading("Links", 2))
            blocks.append(self._bullets(self._link(link) for link in links))

        return blocks

    # ------------------------------------------------------------------
    # entries
    # ------------------------------------------------------------------

    def _bullets(self, items) -> str:
        return "\n".join(f"{self.bullet} {item}" for item in items)

    def _entry(self, title: str, details: list[str]) -> list[str]:
        blocks: list[str] = []
        details = [line for line in details if line]
        if title:
            blocks.append(self.heading(title, 3))
        if details:
            blocks.append(self.details(details))
        return blocks

    def _experience(self, entry: Experience) -> list[str]:
        position = self.clean(entry.position)
        company = self.clean(entry.company)
        title = position or company
        dates = self.entry_dates(entry)
        blocks = self._entry(title, [company if position else "", dates])

        description = self.clean(entry.description)
        if description and entry.shows_description:
            blocks.append(self.free_text(description))
        highlights = self.clean_list(entry.highlights)
        if highlights and entry.shows_highlights:
            blocks.append(self._bullets(self.free_text(item) for item in highlights))
        return blocks

    def _education(self, entry: Education) -> list[str]:
        degree = self.degree_line(entry.degree, entry.field)
        institution = self.clean(entry.institution)
        dates = self.entry_dates(entry)
        details = [institution if degree else "", dates]

        gpa = self.clean(entry.gpa)
        if gpa:
            details.append(f"GPA: {gpa}")
        honors = self.clean_list(entry.honors)
        if honors:
            details.append(f"Honors: {', '.join(honors)}")
        return self._entry(degree or institution, details)

    def _certification(self, cert: Certification) -> list[str]:
        details = [self.clean(cert.issuer)]
        if self.clean(cert.date):
            details.append(f"Issued: {self.clean(cert.date)}")
        if self.clean(cert.expiry_date):
            details.append(f"Expires: {self.clean(cert.expiry_date)}")
        if self.clean(cert.credential_id):
            details.append(f"Credential ID: {self.clean(cert.credential_id)}")
        if self.clean(cert.url):
            details.append(self.clean(cert.url))
        return self._entry(self.clean(cert.name), details)

    def _link(self, link: Link) -> str:
        url = self.clean(link.url)
        label = self.clean(link.label)
        return self.link(label, url) if label else url
