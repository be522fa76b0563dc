"""Standalone styled HTML encoder.

Wraps a :class:`StyleSnapshot` of the live preview in a complete HTML
document.  The snapshot already carries every resolved style inline; the
shell only adds A4 print rules and the layout utility classes whose
keyword values cannot be expressed by the inlined styles alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import Template

from resume_export.encoders.base import ResumeEncoder
from resume_export.errors import MissingSnapshotError
from resume_export.models import ExportFormat
from resume_export.utils.escaping import escape_markup_text

if TYPE_CHECKING:
    from resume_export.models import Resume
    from resume_export.snapshot import StyleSnapshot

__all__ = ["HtmlEncoder"]

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="generator" content="resume-export">
  <title>{{ title }}</title>
  <style>
    @page { size: A4; margin: 0; }
    * { box-sizing: border-box; }
    html, body { margin: 0; padding: 0; background: #ffffff; }
    body {
      -webkit-print-color-adjust: exact;
      print-color-adjust: exact;
      color-adjust: exact;
    }
    .resume-page { width: 210mm; min-height: 297mm; margin: 0 auto; }
    .flex { display: flex; }
    .inline-flex { display: inline-flex; }
    .grid { display: grid; }
    .block { display: block; }
    .inline-block { display: inline-block; }
    .hidden { display: none; }
    .flex-col { flex-direction: column; }
    .flex-wrap { flex-wrap: wrap; }
    .items-center { align-items: center; }
    .justify-between { justify-content: space-between; }
    .shrink-0 { flex-shrink: 0; }
    svg { display: inline-block; vertical-align: middle; }
    @media print {
      html, body { width: 210mm; }
      .resume-page { margin: 0; box-shadow: none; }
      a { color: inherit; text-decoration: none; }
    }
  </style>
</head>
<body>
  <div class="resume-page">
{{ body }}
  </div>
</body>
</html>
"""


class HtmlEncoder(ResumeEncoder):
    """Self-contained HTML built from the preview snapshot."""

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.HTML

    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> str:
        """Render the snapshot into a standalone document.

        Raises:
            MissingSnapshotError: If no snapshot was captured.
        """
        if snapshot is None:
            raise MissingSnapshotError()

        title = self.clean(resume.title) or self.display_name(resume.content.personal_info)
        template = Template(HTML_TEMPLATE)
        return template.render(
            title=escape_markup_text(title or "Resume"),
            body=snapshot.markup,
        )
