"""Schema exports."""

from .resume_record import (
    CertificationEntry,
    EducationEntry,
    ProjectEntry,
    ResumeRecord,
    SkillCategories,
    SkillsVariant,
    WorkExperienceEntry,
    response_json_schema,
    resume_schema,
)

__all__ = [
    "ResumeRecord",
    "SkillCategories",
    "SkillsVariant",
    "WorkExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "CertificationEntry",
    "resume_schema",
    "response_json_schema",
]
