from __future__ import annotations

from datetime import date

import pytest

from resume_export.config import ExportSettings
from resume_export.models import (
    Certification,
    Education,
    Experience,
    Link,
    LinkType,
    PersonalInfo,
    Resume,
    ResumeContent,
    SkillLevel,
    Skills,
)
from resume_export.snapshot import TextNode, VisualNode

FIXED_DATE = date(2024, 3, 5)


def make_resume(title: str = "Engineering Resume", **content) -> Resume:
    """Build a resume with the given ResumeContent fields."""
    return Resume(
        id="resume-1",
        title=title,
        content=ResumeContent(**content),
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-02-01T00:00:00Z",
    )


@pytest.fixture
def full_resume() -> Resume:
    """A resume with every section populated."""
    return make_resume(
        personal_info=PersonalInfo(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            phone="555-0100",
            location="London",
            summary="Analyst & mathematician",
        ),
        experience=[
            Experience(
                id="exp-1",
                company="Analytical Engines Ltd",
                position="Lead Programmer",
                start_date="1842-01",
                end_date="1843-12",
                description="Wrote the first published algorithm.",
                highlights=["Bernoulli numbers", "Notes A-G"],
            ),
            Experience(
                id="exp-2",
                company="Royal Society",
                position="Fellow",
                start_date="1844-01",
                end_date="1850-01",
                current=True,
            ),
        ],
        education=[
            Education(
                id="edu-1",
                institution="University of London",
                degree="B.Sc.",
                field="Mathematics",
                start_date="1832-09",
                end_date="1835-06",
                gpa="3.9",
                honors=["First Class"],
            )
        ],
        skills=Skills(
            technical=["Go", SkillLevel(name="Rust", level="expert")],
            languages=["English", "French"],
        ),
        certifications=[
            Certification(
                id="cert-1",
                name="Certified Analyst",
                issuer="Babbage Institute",
                date="1840-05",
                expiry_date="1852-05",
                credential_id="AB-123",
                url="https://example.com/cert",
            )
        ],
        links=[Link(id="link-1", label="GitHub", url="https://github.com/ada", type=LinkType.GITHUB)],
    )


@pytest.fixture
def minimal_resume() -> Resume:
    """Only a first name; every list empty."""
    return make_resume(personal_info=PersonalInfo(first_name="Ada"))


@pytest.fixture
def no_prompt_settings() -> ExportSettings:
    return ExportSettings(prompt_export_filename=False, settle_delay=0, title_restore_delay=0)


@pytest.fixture
def preview_tree() -> VisualNode:
    """A live preview tree with UI chrome and an icon."""
    return VisualNode(
        "body",
        children=[
            VisualNode("nav", children=[TextNode("Editor toolbar")]),
            VisualNode(
                "div",
                attributes={"id": "resume-preview", "class": "flex flex-col"},
                style={"color": "rgb(255, 0, 0)", "font-size": "14px", "display": "flex"},
                children=[
                    VisualNode("h1", children=[TextNode("Ada <Lovelace>")]),
                    VisualNode("button", children=[TextNode("Edit section")]),
                    VisualNode("span", attributes={"role": "button"}, children=[TextNode("Drag")]),
                    VisualNode(
                        "div",
                        attributes={"data-print-exclude": ""},
                        children=[TextNode("Tip: drag to reorder")],
                    ),
                    VisualNode(
                        "svg",
                        attributes={"viewBox": "0 0 24 24"},
                        style={
                            "width": "16px",
                            "height": "auto",
                            "stroke": "currentColor",
                            "fill": "none",
                            "stroke-width": "2",
                            "stroke-linecap": "round",
                        },
                        children=[VisualNode("path", attributes={"d": "M4 4h16v16H4z"})],
                    ),
                ],
            ),
        ],
    )
