from datetime import date
from typing import Annotated, List, Optional

from pydantic import BeforeValidator, Field

from .base import ApiModel, OptionalText, OptionalUrl, _blank_to_none

OptionalDate = Annotated[Optional[date], BeforeValidator(_blank_to_none)]


class ProfileOwned(ApiModel):
    profile_id: str = Field(min_length=1)


class WorkExperienceSchema(ProfileOwned):
    company: str = Field(min_length=2)
    position: str = Field(min_length=2)
    location: OptionalText = None
    start_date: date
    end_date: OptionalDate = None
    description: OptionalText = None
    achievements: List[str] = Field(default_factory=list)


class EducationSchema(ProfileOwned):
    institution: str = Field(min_length=2)
    degree: str = Field(min_length=2)
    field_of_study: OptionalText = None
    start_date: date
    end_date: OptionalDate = None
    gpa: Optional[float] = Field(default=None, ge=0, le=4)
    description: OptionalText = None


class SkillSchema(ProfileOwned):
    name: str = Field(min_length=1)
    category: OptionalText = None
    proficiency_level: OptionalText = None


class ProjectSchema(ProfileOwned):
    name: str = Field(min_length=2)
    description: OptionalText = None
    technologies: List[str] = Field(default_factory=list)
    url: OptionalUrl = None
    github_url: OptionalUrl = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None


class CertificationSchema(ProfileOwned):
    name: str = Field(min_length=2)
    issuer: str = Field(min_length=2)
    issue_date: date
    expiry_date: OptionalDate = None
    credential_id: OptionalText = None
    credential_url: OptionalUrl = None


class LanguageSchema(ProfileOwned):
    name: str = Field(min_length=2)
    proficiency: OptionalText = None
