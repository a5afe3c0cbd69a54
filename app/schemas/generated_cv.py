from pydantic import Field

from .base import ApiModel, OptionalText


class GenerateCvSchema(ApiModel):
    profile_id: str = Field(min_length=1)
    job_posting_id: OptionalText = None
    include_profile_picture: bool = False
    tone: OptionalText = None
    cv_specific_photo_url: OptionalText = None
    template_name: OptionalText = None
    content_language: OptionalText = None


class SummaryUpdateSchema(ApiModel):
    """The only mutation a generated CV accepts after generation."""

    professional_summary: str
