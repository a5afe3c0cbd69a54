from typing import Optional

from pydantic import Field

from .base import ApiModel


class RegisterSchema(ApiModel):
    name: Optional[str] = None
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=8)


class LoginSchema(ApiModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
