"""Word (DOCX) encoder.

Formatting is expressed as run and paragraph attributes: bold/italic/size/
color on runs, a right-aligned tab stop for date ranges, ``List Bullet``
paragraphs for highlights and a bottom border under section headings.
"""

from __future__ import annotations

import asyncio
import io
from typing import TYPE_CHECKING

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from resume_export.encoders.base import ResumeEncoder
from resume_export.models import ExportFormat

if TYPE_CHECKING:
    from docx.document import Document as DocumentObject
    from docx.text.paragraph import Paragraph

    from resume_export.models import (
        Certification,
        Education,
        Experience,
        Link,
        PersonalInfo,
        Resume,
        Skills,
    )
    from resume_export.snapshot import StyleSnapshot

__all__ = ["DocxEncoder"]

_PRIMARY = RGBColor(31, 78, 121)
_SECONDARY = RGBColor(100, 100, 100)
_BODY_FONT = "Calibri"
_MARGIN = Inches(0.75)
# Right edge of the text area on an A4 page with 0.75in margins.
_RIGHT_TAB = Inches(8.27 - 2 * 0.75)


class DocxEncoder(ResumeEncoder):
    """Editable, ATS-friendly Word document."""

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.DOCX

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> bytes:
        doc = self.build(resume)
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    async def encode_async(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> bytes:
        """Assemble the package in a worker thread."""
        return await asyncio.to_thread(self.encode, resume, snapshot)

    def build(self, resume: Resume) -> DocumentObject:
        content = resume.content
        doc = self._create_document()
        self._add_heading(doc, content.personal_info)

        summary = self.clean(content.personal_info.summary)
        if summary:
            self._section_heading(doc, "Summary")
            self._paragraph(doc, summary)

        if content.experience:
            self._section_heading(doc, "Experience")
            for entry in content.experience:
                self._add_experience(doc, entry)

        if content.education:
            self._section_heading(doc, "Education")
            for entry in content.education:
                self._add_education(doc, entry)

        if self.skill_lines(content.skills):
            self._section_heading(doc, "Skills")
            self._add_skills(doc, content.skills)

        if content.certifications:
            self._section_heading(doc, "Certifications")
            for cert in content.certifications:
                self._add_certification(doc, cert)

        links = [link for link in content.links if self.clean(link.url)]
        if links:
            self._section_heading(doc, "Links")
            for link in links:
                self._add_link(doc, link)

        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _create_document(self) -> DocumentObject:
        doc = Document()
        for section in doc.sections:
            section.page_width = Inches(8.27)
            section.page_height = Inches(11.69)
            section.left_margin = section.right_margin = _MARGIN
            section.top_margin = section.bottom_margin = _MARGIN

        normal = doc.styles["Normal"]
        normal.font.name = _BODY_FONT
        normal.font.size = Pt(11)
        return doc

    @staticmethod
    def _paragraph(doc: DocumentObject, text: str = "", *, space_after: int = 2) -> Paragraph:
        paragraph = doc.add_paragraph(text)
        paragraph.paragraph_format.space_after = Pt(space_after)
        return paragraph

    @staticmethod
    def _bottom_border(paragraph: Paragraph) -> None:
        p_pr = paragraph._p.get_or_add_pPr()
        borders = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), "6")
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), str(_PRIMARY))
        borders.append(bottom)
        p_pr.append(borders)

    def _section_heading(self, doc: DocumentObject, title: str) -> None:
        paragraph = self._paragraph(doc, space_after=4)
        paragraph.paragraph_format.space_before = Pt(10)
        run = paragraph.add_run(title.upper())
        run.bold = True
        run.font.size = Pt(12)
        run.font.color.rgb = _PRIMARY
        self._bottom_border(paragraph)

    def _title_line(self, doc: DocumentObject, title: str, right: str) -> None:
        """Bold title with *right* pushed to the right margin by a tab stop."""
        paragraph = self._paragraph(doc, space_after=0)
        paragraph.paragraph_format.tab_stops.add_tab_stop(_RIGHT_TAB, WD_TAB_ALIGNMENT.RIGHT)
        title_run = paragraph.add_run(title)
        title_run.bold = True
        if right:
            date_run = paragraph.add_run(f"\t{right}")
            date_run.italic = True
            date_run.font.color.rgb = _SECONDARY

    def _subtitle_line(self, doc: DocumentObject, text: str) -> None:
        if not text:
            return
        paragraph = self._paragraph(doc, space_after=2)
        run = paragraph.add_run(text)
        run.italic = True

    def _bullets(self, doc: DocumentObject, items: list[str]) -> None:
        for item in items:
            paragraph = doc.add_paragraph(item, style="List Bullet")
            paragraph.paragraph_format.space_after = Pt(0)

    # -- heading -----------------------------------------------------------

    def _add_heading(self, doc: DocumentObject, info: PersonalInfo) -> None:
        name = self.display_name(info)
        if name:
            paragraph = self._paragraph(doc, space_after=2)
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = paragraph.add_run(name)
            run.bold = True
            run.font.size = Pt(22)
            run.font.color.rgb = _PRIMARY

        contact = self.contact_parts(info)
        if contact:
            paragraph = self._paragraph(doc, space_after=6)
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = paragraph.add_run(" | ".join(contact))
            run.font.size = Pt(10)
            run.font.color.rgb = _SECONDARY

    # -- entries -----------------------------------------------------------

    def _add_experience(self, doc: DocumentObject, entry: Experience) -> None:
        self._title_line(
            doc,
            self.clean(entry.position),
            self.entry_dates(entry),
        )
        self._subtitle_line(doc, self.clean(entry.company))

        description = self.clean(entry.description)
        if description and entry.shows_description:
            self._paragraph(doc, description)
        if entry.shows_highlights:
            self._bullets(doc, self.clean_list(entry.highlights))

    def _add_education(self, doc: DocumentObject, entry: Education) -> None:
        self._title_line(
            doc,
            self.clean(entry.institution),
            self.entry_dates(entry),
        )
        self._subtitle_line(doc, self.degree_line(entry.degree, entry.field))

        gpa = self.clean(entry.gpa)
        if gpa:
            self._paragraph(doc, f"GPA: {gpa}")
        honors = self.clean_list(entry.honors)
        if honors:
            self._paragraph(doc, f"Honors: {', '.join(honors)}")

    def _add_skills(self, doc: DocumentObject, skills: Skills) -> None:
        for label, names in self.skill_lines(skills):
            paragraph = self._paragraph(doc)
            label_run = paragraph.add_run(f"{label}: ")
            label_run.bold = True
            paragraph.add_run(names)

    def _add_certification(self, doc: DocumentObject, cert: Certification) -> None:
        self._title_line(doc, self.clean(cert.name), self.clean(cert.date))
        self._subtitle_line(doc, self.clean(cert.issuer))

        if self.clean(cert.expiry_date):
            self._paragraph(doc, f"Expires: {self.clean(cert.expiry_date)}")
        if self.clean(cert.credential_id):
            self._paragraph(doc, f"Credential ID: {self.clean(cert.credential_id)}")
        if self.clean(cert.url):
            self._paragraph(doc, self.clean(cert.url))

    def _add_link(self, doc: DocumentObject, link: Link) -> None:
        paragraph = self._paragraph(doc)
        label = self.clean(link.label)
        if label:
            label_run = paragraph.add_run(f"{label}: ")
            label_run.bold = True
        url_run = paragraph.add_run(self.clean(link.url))
        url_run.font.color.rgb = _PRIMARY
        url_run.underline = True
