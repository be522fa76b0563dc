"""Tests for the resume models and export format metadata."""

from __future__ import annotations

import json

from conftest import make_resume

from resume_export.models import (
    EXPORT_FORMATS,
    PRINT_FORMATS,
    Education,
    Experience,
    ExperienceFormat,
    ExportFormat,
    Resume,
    SkillLevel,
)


class TestResumeModel:
    def test_json_round_trip(self, full_resume) -> None:
        restored = Resume.model_validate_json(full_resume.model_dump_json(by_alias=True))
        assert restored == full_resume

    def test_empty_resume_round_trip(self) -> None:
        resume = make_resume()
        restored = Resume.model_validate_json(resume.model_dump_json(by_alias=True))
        assert restored == resume

    def test_camel_case_keys(self, full_resume) -> None:
        data = json.loads(full_resume.model_dump_json(by_alias=True))
        assert "createdAt" in data
        assert "personalInfo" in data["content"]
        assert data["content"]["personalInfo"]["firstName"] == "Ada"
        assert data["content"]["experience"][0]["startDate"] == "1842-01"
        assert data["content"]["certifications"][0]["credentialId"] == "AB-123"

    def test_accepts_wire_payload(self) -> None:
        payload = {
            "id": "r-9",
            "title": "Wire",
            "content": {
                "personalInfo": {"firstName": "Grace", "nameOrder": "lastFirst"},
                "skills": {"technical": ["COBOL", {"name": "Fortran", "level": "advanced"}]},
            },
        }
        resume = Resume.model_validate(payload)
        assert resume.content.personal_info.first_name == "Grace"
        assert resume.content.skills.technical[0] == "COBOL"
        assert resume.content.skills.technical[1] == SkillLevel(name="Fortran", level="advanced")


class TestEffectiveEndDate:
    def test_current_experience_has_no_end(self) -> None:
        entry = Experience(start_date="2020-01", end_date="2021-01", current=True)
        assert entry.effective_end_date is None

    def test_finished_experience(self) -> None:
        assert Experience(end_date="2021-01").effective_end_date == "2021-01"

    def test_blank_end_is_none(self) -> None:
        assert Education(end_date="  ").effective_end_date is None


class TestExperienceFormat:
    def test_structured_shows_both(self) -> None:
        entry = Experience(format=ExperienceFormat.STRUCTURED)
        assert entry.shows_description and entry.shows_highlights

    def test_bullets_hides_description(self) -> None:
        entry = Experience(format=ExperienceFormat.BULLETS)
        assert not entry.shows_description
        assert entry.shows_highlights

    def test_freeform_hides_highlights(self) -> None:
        entry = Experience(format=ExperienceFormat.FREEFORM)
        assert entry.shows_description
        assert not entry.shows_highlights


class TestExportFormats:
    def test_every_format_has_metadata(self) -> None:
        assert set(EXPORT_FORMATS) == set(ExportFormat)

    def test_extensions(self) -> None:
        assert EXPORT_FORMATS[ExportFormat.LATEX].extension == "tex"
        assert EXPORT_FORMATS[ExportFormat.MARKDOWN].extension == "md"
        assert EXPORT_FORMATS[ExportFormat.DOCX].extension == "docx"

    def test_print_formats(self) -> None:
        assert PRINT_FORMATS == {ExportFormat.PRINT, ExportFormat.PDF_PRINT}
        assert ExportFormat("pdf-print") is ExportFormat.PDF_PRINT
