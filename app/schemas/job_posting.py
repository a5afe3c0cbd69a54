from typing import List

from pydantic import Field

from .base import ApiModel, OptionalText, OptionalUrl


class JobPostingSchema(ApiModel):
    job_title: str = Field(min_length=1)
    company: OptionalText = None
    job_url: OptionalUrl = None
    job_description: str = Field(min_length=1)
    required_skills: List[str] = Field(default_factory=list)
    experience_level: OptionalText = None
