"""Canonical JSON encoder.

The lossless reference format: the whole :class:`Resume` (not just its
content) in model field order with camelCase keys and 2-space indentation.
``Resume.model_validate_json`` reads the output back into an equal model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_export.encoders.base import ResumeEncoder
from resume_export.models import ExportFormat

if TYPE_CHECKING:
    from resume_export.models import Resume
    from resume_export.snapshot import StyleSnapshot

__all__ = ["JsonEncoder"]


class JsonEncoder(ResumeEncoder):
    """Serialize the full resume entity."""

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.JSON

    def encode(self, resume: Resume, snapshot: StyleSnapshot | None = None) -> str:
        return resume.model_dump_json(by_alias=True, indent=2)
