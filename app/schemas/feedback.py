from pydantic import field_validator

from .base import ApiModel


class FeedbackSchema(ApiModel):
    description: str

    @field_validator("description")
    @classmethod
    def check_description(cls, value):
        if not value:
            raise ValueError("Description cannot be empty")
        if len(value) < 10:
            raise ValueError("Description must be at least 10 characters long")
        return value
