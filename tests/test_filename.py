"""Tests for export filename resolution."""

from __future__ import annotations

import re
from unittest.mock import MagicMock, patch

from conftest import FIXED_DATE, make_resume

from resume_export.config import ExportSettings
from resume_export.models import PersonalInfo
from resume_export.services.filename import FilenameResolver, default_filename

PROMPT = ExportSettings(prompt_export_filename=True)
NO_PROMPT = ExportSettings(prompt_export_filename=False)


def _resolver(prompt=None) -> FilenameResolver:
    return FilenameResolver(prompt=prompt or MagicMock(), today=lambda: FIXED_DATE)


class TestDefaultFilename:
    def test_full_name(self, full_resume) -> None:
        assert default_filename(full_resume, "pdf", FIXED_DATE) == (
            "Ada_Lovelace_Resume_2024-03-05.pdf"
        )

    def test_first_name_only(self, minimal_resume) -> None:
        assert default_filename(minimal_resume, "md", FIXED_DATE) == "Ada_Resume_2024-03-05.md"

    def test_last_name_only(self) -> None:
        resume = make_resume(personal_info=PersonalInfo(last_name="Hopper"))
        assert default_filename(resume, "txt", FIXED_DATE) == "Hopper_Resume_2024-03-05.txt"

    def test_falls_back_to_title(self) -> None:
        resume = make_resume(title="My CV: Draft")
        assert default_filename(resume, "txt", FIXED_DATE) == "My_CV_Draft_2024-03-05.txt"

    def test_falls_back_to_resume(self) -> None:
        resume = make_resume(title="   ")
        assert default_filename(resume, "json", FIXED_DATE) == "Resume_2024-03-05.json"

    def test_sanitizes_name_but_keeps_extension_dot(self) -> None:
        resume = make_resume(personal_info=PersonalInfo(first_name="José", last_name="O'Neil"))
        filename = default_filename(resume, "docx", FIXED_DATE)
        assert filename == "Jos_O_Neil_Resume_2024-03-05.docx"
        assert re.fullmatch(r"[A-Za-z0-9_.-]+", filename)


class TestFilenameResolver:
    def test_prompt_disabled_returns_default(self, full_resume) -> None:
        prompt = MagicMock()
        resolver = _resolver(prompt)
        assert resolver.resolve(full_resume, "tex", NO_PROMPT) == (
            "Ada_Lovelace_Resume_2024-03-05.tex"
        )
        prompt.assert_not_called()

    def test_repeated_calls_are_deterministic(self, full_resume) -> None:
        resolver = _resolver()
        first = resolver.resolve(full_resume, "md", NO_PROMPT)
        assert all(resolver.resolve(full_resume, "md", NO_PROMPT) == first for _ in range(3))

    def test_prompt_receives_stem_without_extension(self, full_resume) -> None:
        prompt = MagicMock(return_value="Ada_Lovelace_Resume_2024-03-05")
        _resolver(prompt).resolve(full_resume, "pdf", PROMPT)
        prompt.assert_called_once_with("Ada_Lovelace_Resume_2024-03-05")

    def test_cancel_returns_none(self, full_resume) -> None:
        resolver = _resolver(MagicMock(return_value=None))
        assert resolver.resolve(full_resume, "pdf", PROMPT) is None

    def test_blank_input_falls_back_to_default(self, full_resume) -> None:
        resolver = _resolver(MagicMock(return_value="   "))
        assert resolver.resolve(full_resume, "pdf", PROMPT) == (
            "Ada_Lovelace_Resume_2024-03-05.pdf"
        )

    def test_user_input_is_sanitized(self, full_resume) -> None:
        resolver = _resolver(MagicMock(return_value="my final/resume v2"))
        assert resolver.resolve(full_resume, "docx", PROMPT) == "my_final_resume_v2.docx"


class TestEasyguiPrompt:
    def test_cancelled_dialog(self, full_resume) -> None:
        resolver = FilenameResolver(today=lambda: FIXED_DATE)
        with patch("easygui.enterbox", return_value=None) as enterbox:
            assert resolver.resolve(full_resume, "md", PROMPT) is None
        assert enterbox.call_args.kwargs["default"] == "Ada_Lovelace_Resume_2024-03-05"

    def test_entered_name(self, full_resume) -> None:
        resolver = FilenameResolver(today=lambda: FIXED_DATE)
        with patch("easygui.enterbox", return_value="Ada CV"):
            assert resolver.resolve(full_resume, "md", PROMPT) == "Ada_CV.md"
