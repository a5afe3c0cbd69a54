from typing import Optional

from pydantic import Field

from .base import ApiModel, OptionalText, OptionalUrl


class ProfileSchema(ApiModel):
    full_name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: OptionalText = None
    phone: OptionalText = None
    location: OptionalText = None
    linkedin_url: OptionalUrl = None
    github_url: OptionalUrl = None
    portfolio_url: OptionalUrl = None
    professional_summary: OptionalText = None
    profile_picture_url: OptionalText = None
