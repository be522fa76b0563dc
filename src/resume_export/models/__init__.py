"""Data models and type definitions"""

from resume_export.models.export import (
    EXPORT_FORMATS,
    PRINT_FORMATS,
    ExportFormat,
    ExportFormatInfo,
    ExportResult,
)
from resume_export.models.resume import (
    Certification,
    Education,
    Experience,
    ExperienceFormat,
    Link,
    LinkType,
    NameOrder,
    PersonalInfo,
    PhoneFormat,
    Resume,
    ResumeContent,
    SkillEntry,
    SkillLevel,
    Skills,
)

__all__ = [
    "EXPORT_FORMATS",
    "PRINT_FORMATS",
    "Certification",
    "Education",
    "Experience",
    "ExperienceFormat",
    "ExportFormat",
    "ExportFormatInfo",
    "ExportResult",
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
