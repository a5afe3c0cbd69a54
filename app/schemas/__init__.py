"""Validated input shapes for every resource.

Payloads arrive camelCase (the shape the web client sends) and are
exposed snake_case to the rest of the app. ``validate_payload`` collects
every field error instead of stopping at the first one.
"""
from pydantic import ValidationError as PydanticValidationError

from app.errors import ValidationError
from .base import ApiModel
from .profile import ProfileSchema
from .resources import (
    WorkExperienceSchema,
    EducationSchema,
    SkillSchema,
    ProjectSchema,
    CertificationSchema,
    LanguageSchema,
)
from .job_posting import JobPostingSchema
from .generated_cv import GenerateCvSchema, SummaryUpdateSchema
from .feedback import FeedbackSchema
from .auth import RegisterSchema, LoginSchema


def collect_errors(error: PydanticValidationError) -> list:
    """Flatten a pydantic error into ``[{field, message}]``."""
    details = []
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "__root__"
        details.append({"field": field, "message": item.get("msg", "Invalid value")})
    return details


def validate_payload(schema, data):
    if data is None:
        raise ValidationError.for_field("__root__", "No JSON data provided")
    if not isinstance(data, dict):
        raise ValidationError.for_field("__root__", "Request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError("Validation failed", details=collect_errors(e)) from e


def validate_patch(schema, record, data):
    """Validate a partial update against the record's merged state.

    Returns a dict of only the attributes the caller supplied, keyed by
    model attribute name.
    """
    if not isinstance(data, dict):
        raise ValidationError.for_field("__root__", "Request body must be a JSON object")

    by_alias = {}
    for name, field in schema.model_fields.items():
        by_alias[field.alias or name] = name

    unknown = [key for key in data if key not in by_alias and key not in schema.model_fields]
    if unknown:
        raise ValidationError(
            "Validation failed",
            details=[{"field": key, "message": "Extra inputs are not permitted"} for key in unknown],
        )

    current = {}
    for alias, name in by_alias.items():
        if hasattr(record, name):
            current[alias] = getattr(record, name)
    supplied = {by_alias.get(key, key) for key in data}
    merged = {**{k: v for k, v in current.items() if v is not None}, **_to_aliases(schema, data)}

    validated = validate_payload(schema, merged)
    return validated.model_dump(include=supplied)


def _to_aliases(schema, data):
    aliased = {}
    for key, value in data.items():
        field = schema.model_fields.get(key)
        aliased[field.alias if field is not None and field.alias else key] = value
    return aliased


__all__ = [
    "ApiModel",
    "ProfileSchema",
    "WorkExperienceSchema",
    "EducationSchema",
    "SkillSchema",
    "ProjectSchema",
    "CertificationSchema",
    "LanguageSchema",
    "JobPostingSchema",
    "GenerateCvSchema",
    "SummaryUpdateSchema",
    "FeedbackSchema",
    "RegisterSchema",
    "LoginSchema",
    "collect_errors",
    "validate_payload",
    "validate_patch",
]
