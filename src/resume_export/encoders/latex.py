"""LaTeX source encoder.

Produces a compilable single-column article using PyLaTeX.  Compiling the
output is left to the user; it is best effort and not validated here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_export.encoders.base import ResumeEncoder
from resume_export.models import ExportFormat
from resume_export.utils.escaping import escape_latex

if TYPE_CHECKING:
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

__all__ = ["LatexEncoder"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("titlesec"),
    Package("enumitem"),
    Package("xcolor"),
    Package("hyperref", options=NoEscape("colorlinks=true,urlcolor=linkblue,linkcolor=linkblue")),
]

_PREAMBLE_SETUP = r"""
\definecolor{linkblue}{RGB}{31,78,121}
\pagestyle{empty}
\setlength{\parindent}{0pt}
\urlstyle{same}
\raggedbottom
\raggedright
\titleformat{\section}{\large\bfseries\scshape}{}{0em}{}[\titlerule]
\titlespacing*{\section}{0pt}{10pt}{6pt}
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\resumeItem}[1]{\item\small{#1}}
\newcommand{\resumeItemListStart}{\begin{itemize}[leftmargin=0.2in, itemsep=1pt, topsep=2pt]}
\newcommand{\resumeItemListEnd}{\end{itemize}}
"""

_CONTACT_SEPARATOR = r" $|$ "


def _escape_url(url: str) -> str:
    """Make *url* safe inside ``\\href`` while keeping it a working link."""
    cleaned = url.strip().replace("\\", "").replace("{", "").replace("}", "")
    return cleaned.replace("%", r"\%").replace("#", r"\#")


class LatexEncoder(ResumeEncoder):
    """Single-column LaTeX resume."""

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.LATEX

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> str:
        return self.build(resume).dumps()

    def build(self, resume: Resume) -> Document:
        content = resume.content
        doc = self._create_document()
        self._add_heading(doc, content.personal_info)

        summary = self.clean(content.personal_info.summary)
        if summary:
            doc.append(NoEscape("\n".join([r"\section*{Summary}", escape_latex(summary)])))

        if content.experience:
            self._add_experience(doc, content.experience)

        if content.education:
            self._add_education(doc, content.education)

        if self.skill_lines(content.skills):
            self._add_skills(doc, content.skills)

        if content.certifications:
            self._add_certifications(doc, content.certifications)

        links = [link for link in content.links if self.clean(link.url)]
        if links:
            self._add_links(doc, links)

        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _create_document(self) -> Document:
        doc = Document(
            documentclass="article",
            document_options=["a4paper", "11pt"],
            geometry_options={"margin": "0.75in"},
            page_numbers=False,
            indent=False,
            lmodern=False,
            textcomp=False,
            microtype=False,
        )
        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        doc.preamble.append(NoEscape(_CUSTOM_COMMANDS))
        return doc

    def _item_list(self, items: list[str]) -> list[str]:
        if not items:
            return []
        lines = [r"\resumeItemListStart"]
        lines.extend(rf"\resumeItem{{{escape_latex(item)}}}" for item in items)
        lines.append(r"\resumeItemListEnd")
        return lines

    # -- heading -----------------------------------------------------------

    def _add_heading(self, doc: Document, info: PersonalInfo) -> None:
        name = escape_latex(self.display_name(info))
        contact = [escape_latex(part) for part in self.contact_parts(info)]
        if not name and not contact:
            return

        lines = [r"\begin{center}"]
        if name:
            lines.append(rf"{{\Huge \textbf{{{name}}}}} \\ \vspace{{4pt}}")
        if contact:
            lines.append(rf"\small {_CONTACT_SEPARATOR.join(contact)}")
        lines.append(r"\end{center}")
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, entries: list[Experience]) -> None:
        lines = [r"\section*{Experience}"]
        for entry in entries:
            position = escape_latex(self.clean(entry.position))
            company = escape_latex(self.clean(entry.company))
            date_range = escape_latex(self.entry_dates(entry))
            lines.append(rf"\textbf{{{position}}} \hfill {date_range} \\")
            lines.append(rf"\textit{{{company}}}")

            description = self.clean(entry.description)
            if description and entry.shows_description:
                lines.append(r"\par\smallskip")
                lines.append(escape_latex(description))
            if entry.shows_highlights:
                lines.extend(self._item_list(self.clean_list(entry.highlights)))
            lines.append(r"\par\medskip")
        doc.append(NoEscape("\n".join(lines)))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, entries: list[Education]) -> None:
        lines = [r"\section*{Education}"]
        for entry in entries:
            institution = escape_latex(self.clean(entry.institution))
            degree = escape_latex(self.degree_line(entry.degree, entry.field))
            date_range = escape_latex(self.entry_dates(entry))
            lines.append(rf"\textbf{{{institution}}} \hfill {date_range} \\")
            lines.append(rf"\textit{{{degree}}}")

            details: list[str] = []
            gpa = self.clean(entry.gpa)
            if gpa:
                details.append(f"GPA: {gpa}")
            honors = self.clean_list(entry.honors)
            if honors:
                details.append(f"Honors: {', '.join(honors)}")
            lines.extend(self._item_list(details))
            lines.append(r"\par\medskip")
        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, skills: Skills) -> None:
        lines = [r"\section*{Skills}"]
        rows = [
            rf"\textbf{{{escape_latex(label)}}}: {escape_latex(names)}"
            for label, names in self.skill_lines(skills)
        ]
        lines.append(" \\\\\n".join(rows))
        doc.append(NoEscape("\n".join(lines)))

    # -- certifications ----------------------------------------------------

    def _add_certifications(self, doc: Document, entries: list[Certification]) -> None:
        lines = [r"\section*{Certifications}"]
        for cert in entries:
            name = escape_latex(self.clean(cert.name))
            issued = escape_latex(self.clean(cert.date))
            lines.append(rf"\textbf{{{name}}} \hfill {issued} \\")
            lines.append(rf"\textit{{{escape_latex(self.clean(cert.issuer))}}}")

            details: list[str] = []
            if self.clean(cert.expiry_date):
                details.append(rf"Expires: {escape_latex(self.clean(cert.expiry_date))}")
            if self.clean(cert.credential_id):
                details.append(
                    rf"Credential ID: {escape_latex(self.clean(cert.credential_id))}"
                )
            url = self.clean(cert.url)
            if url:
                details.append(rf"\href{{{_escape_url(url)}}}{{{escape_latex(url)}}}")
            if details:
                lines.append(r" \\" + "\n" + " \\\\\n".join(details))
            lines.append(r"\par\medskip")
        doc.append(NoEscape("\n".join(lines)))

    # -- links -------------------------------------------------------------

    def _add_links(self, doc: Document, links: list[Link]) -> None:
        lines = [r"\section*{Links}"]
        rows = []
        for link in links:
            url = self.clean(link.url)
            label = escape_latex(self.clean(link.label) or url)
            rows.append(rf"\textbf{{{label}}}: \href{{{_escape_url(url)}}}{{{escape_latex(url)}}}")
        lines.append(" \\\\\n".join(rows))
        doc.append(NoEscape("\n".join(lines)))
