"""Pydantic models for the canonical resume document.

These models mirror the application's wire shape (camelCase keys) so a
resume exported as JSON can be read back into an equal model.  Encoders
depend ONLY on these contracts, never on the store that produced them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "Certification",
    "Education",
    "Experience",
    "ExperienceFormat",
    "Link",
    "LinkType",
    "NameOrder",
    "PersonalInfo",
    "PhoneFormat",
    "Resume",
    "ResumeContent",
    "SkillEntry",
    "SkillLevel",
    "Skills",
]


class NameOrder(str, Enum):
    """Display order of the personal name."""

    FIRST_LAST = "firstLast"
    LAST_FIRST = "lastFirst"


class PhoneFormat(str, Enum):
    """Phone display format chosen in the editor."""

    NATIONAL = "national"
    INTERNATIONAL = "international"
    E164 = "e164"


class ExperienceFormat(str, Enum):
    """How an experience entry's body is rendered.

    - ``structured``: description paragraph followed by highlight bullets
    - ``bullets``: highlight bullets only
    - ``freeform``: description only
    """

    STRUCTURED = "structured"
    BULLETS = "bullets"
    FREEFORM = "freeform"


class LinkType(str, Enum):
    """Kind of a profile link."""

    WEBSITE = "website"
    LINKEDIN = "linkedin"
    GITHUB = "github"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    DRIBBBLE = "dribbble"
    CODEPEN = "codepen"
    FIGMA = "figma"
    TWITCH = "twitch"
    SLACK = "slack"
    EMAIL = "email"
    OTHER = "other"


class _Model(BaseModel):
    """Shared config: camelCase aliases, snake_case attributes, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PersonalInfo(_Model):
    """Name and contact details shown in the resume header."""

    first_name: str = ""
    last_name: str = ""
    name_order: NameOrder = NameOrder.FIRST_LAST
    email: str = ""
    phone: str = ""
    phone_format: PhoneFormat | None = None
    location: str = ""
    summary: str = ""


class Experience(_Model):
    """A single work-experience record."""

    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""  # YYYY-MM
    end_date: str = ""
    current: bool = False
    description: str = ""
    highlights: list[str] = Field(default_factory=list)
    format: ExperienceFormat = ExperienceFormat.STRUCTURED

    @property
    def effective_end_date(self) -> str | None:
        """End date, or *None* for a current position."""
        if self.current:
            return None
        return self.end_date.strip() or None

    @property
    def shows_description(self) -> bool:
        return self.format in (ExperienceFormat.STRUCTURED, ExperienceFormat.FREEFORM)

    @property
    def shows_highlights(self) -> bool:
        return self.format in (ExperienceFormat.STRUCTURED, ExperienceFormat.BULLETS)


class Education(_Model):
    """A single education record."""

    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    gpa: str | None = None
    honors: list[str] = Field(default_factory=list)

    @property
    def effective_end_date(self) -> str | None:
        """End date, or *None* while still enrolled."""
        if self.current:
            return None
        return self.end_date.strip() or None


class SkillLevel(_Model):
    """A skill with a self-assessed proficiency level."""

    name: str
    level: str = ""


SkillEntry = str | SkillLevel


class Skills(_Model):
    """Skill lists split into the four fixed categories."""

    technical: list[SkillEntry] = Field(default_factory=list)
    languages: list[SkillEntry] = Field(default_factory=list)
    tools: list[SkillEntry] = Field(default_factory=list)
    soft: list[SkillEntry] = Field(default_factory=list)


class Certification(_Model):
    """A professional certification."""

    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: str | None = None
    credential_id: str | None = None
    url: str | None = None


class Link(_Model):
    """A labelled profile or portfolio link."""

    id: str = ""
    label: str = ""
    url: str = ""
    type: LinkType = LinkType.OTHER


class ResumeContent(_Model):
    """Aggregate of every section the encoders render."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    certifications: list[Certification] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


class Resume(_Model):
    """Root resume entity as handed over by the persistence layer."""

    id: str
    title: str = ""
    content: ResumeContent = Field(default_factory=ResumeContent)
    created_at: str = ""
    updated_at: str = ""
    user_id: str | None = None
    version: int | None = None
