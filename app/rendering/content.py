"""The closed, versioned document shared by the assembler and every layout.

A ``GeneratedCvContent`` is a snapshot: entries are flattened copies of
the profile's entities at generation time, never live references.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CONTENT_SCHEMA_VERSION = 1

SectionKey = Literal[
    "professionalSummary",
    "workExperience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
]


class ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class WorkExperienceEntry(ContentModel):
    company: str
    position: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)


class EducationEntry(ContentModel):
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[float] = None
    description: Optional[str] = None


class SkillEntry(ContentModel):
    name: str
    category: Optional[str] = None
    proficiency_level: Optional[str] = None


class ProjectEntry(ContentModel):
    name: str
    description: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    github_url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class CertificationEntry(ContentModel):
    name: str
    issuer: str
    issue_date: Optional[str] = None
    expiry_date: Optional[str] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None


class LanguageEntry(ContentModel):
    name: str
    proficiency: Optional[str] = None


class GeneratedCvContent(ContentModel):
    schema_version: Literal[1] = CONTENT_SCHEMA_VERSION
    professional_summary: str = ""
    work_experience: List[WorkExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    section_titles: Optional[Dict[SectionKey, str]] = None

    def to_json(self) -> dict:
        """JSON-ready dict, camelCase keys, as stored on the GeneratedCV row."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_json(cls, data: dict) -> "GeneratedCvContent":
        return cls.model_validate(data)

    def with_summary(self, summary: str) -> "GeneratedCvContent":
        return self.model_copy(update={"professional_summary": summary})
