"""Structured resume record returned by the intake pipeline."""

from enum import Enum
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field


class SkillsVariant(str, Enum):
    """Output shape of the skills field, fixed per deployment."""

    FLAT = "flat"
    CATEGORIZED = "categorized"


SKILL_CATEGORIES = ("languages", "frameworksLibraries", "databases", "cloudDevops", "tools")

SCALAR_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "phone",
    "location",
    "headline",
    "summary",
    "linkedin",
    "github",
    "portfolio",
    "leetcode",
    "youtube",
)

LIST_FIELDS = ("workExperience", "education", "projects", "certifications")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DateRange(_CamelModel):
    start: str = Field(default="", description="Start date as written (e.g. 'Jan 2019')")
    end: str = Field(default="", description="End date as written, or 'Present'")


class WorkExperienceEntry(_CamelModel):
    """One position held."""

    company: str = Field(default="", description="Employer name")
    title: str = Field(default="", description="Job title")
    date_range: Union[DateRange, str] = Field(default="", alias="dateRange", description="Start/end or free text")
    description: str = Field(default="", description="Responsibilities and achievements")


class EducationEntry(_CamelModel):
    institution: str = Field(default="", description="School or university")
    degree: str = Field(default="", description="Degree and field of study")
    date_range: Union[DateRange, str] = Field(default="", alias="dateRange", description="Start/end or free text")


class ProjectEntry(_CamelModel):
    name: str = Field(default="", description="Project name")
    description: str = Field(default="", description="What the project does")


class CertificationEntry(_CamelModel):
    name: str = Field(default="", description="Certification title")
    issuing_organization: str = Field(default="", alias="issuingOrganization", description="Issuer")
    date: str = Field(default="", description="Issue date as written")


class SkillCategories(_CamelModel):
    """Categorized skills; each category is validated independently."""

    languages: List[Any] = Field(default_factory=list, description="Programming languages")
    frameworks_libraries: List[Any] = Field(
        default_factory=list, alias="frameworksLibraries", description="Frameworks and libraries"
    )
    databases: List[Any] = Field(default_factory=list, description="Databases and data stores")
    cloud_devops: List[Any] = Field(default_factory=list, alias="cloudDevops", description="Cloud and DevOps")
    tools: List[Any] = Field(default_factory=list, description="Other tools and software")

    def all_skills(self) -> List[Any]:
        return [
            *self.languages,
            *self.frameworks_libraries,
            *self.databases,
            *self.cloud_devops,
            *self.tools,
        ]


class ResumeRecord(_CamelModel):
    """
    Sanitized resume profile. Every field is always present and type-correct;
    list elements are kept exactly as the model returned them.
    """

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = Field(default="")
    phone: str = Field(default="")
    location: str = Field(default="")
    headline: str = Field(default="", description="Professional headline or current title")
    summary: str = Field(default="", description="Professional summary")

    linkedin: str = Field(default="")
    github: str = Field(default="")
    portfolio: str = Field(default="")
    leetcode: str = Field(default="")
    youtube: str = Field(default="")

    skills: Union[SkillCategories, List[Any]] = Field(default_factory=list)
    work_experience: List[Any] = Field(default_factory=list, alias="workExperience")
    education: List[Any] = Field(default_factory=list)
    projects: List[Any] = Field(default_factory=list)
    certifications: List[Any] = Field(default_factory=list)

    confidence: int = Field(default=0, ge=0, le=100, description="Heuristic completeness score")

    def skill_list(self) -> List[Any]:
        """All skills regardless of the configured variant."""
        if isinstance(self.skills, SkillCategories):
            return self.skills.all_skills()
        return list(self.skills)

    def to_json_dict(self) -> dict:
        """Serialize with the camelCase field names."""
        return self.model_dump(by_alias=True, mode="json")


def resume_schema(variant: SkillsVariant = SkillsVariant.FLAT) -> dict:
    """Fresh canonical schema: camelCase key -> default value."""
    schema: dict = {name: "" for name in SCALAR_FIELDS}
    if variant == SkillsVariant.CATEGORIZED:
        schema["skills"] = {category: [] for category in SKILL_CATEGORIES}
    else:
        schema["skills"] = []
    for name in LIST_FIELDS:
        schema[name] = []
    return schema


def _object_schema(model: type) -> dict:
    properties = {}
    for name, field in model.model_fields.items():
        key = field.alias or name
        if name == "date_range":
            properties[key] = {
                "anyOf": [
                    {"type": "string"},
                    {
                        "type": "object",
                        "properties": {"start": {"type": "string"}, "end": {"type": "string"}},
                    },
                ]
            }
        else:
            properties[key] = {"type": "string"}
    return {"type": "object", "properties": properties}


def response_json_schema(variant: SkillsVariant = SkillsVariant.FLAT) -> dict:
    """JSON Schema sent to the model as the response format."""
    string_list = {"type": "array", "items": {"type": "string"}}
    properties: dict = {name: {"type": "string"} for name in SCALAR_FIELDS}
    if variant == SkillsVariant.CATEGORIZED:
        properties["skills"] = {
            "type": "object",
            "properties": {category: string_list for category in SKILL_CATEGORIES},
        }
    else:
        properties["skills"] = string_list
    properties["workExperience"] = {"type": "array", "items": _object_schema(WorkExperienceEntry)}
    properties["education"] = {"type": "array", "items": _object_schema(EducationEntry)}
    properties["projects"] = {"type": "array", "items": _object_schema(ProjectEntry)}
    properties["certifications"] = {"type": "array", "items": _object_schema(CertificationEntry)}
    return {"type": "object", "properties": properties}
