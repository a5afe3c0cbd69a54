from .content import GeneratedCvContent
from .renderer import (
    TemplateName,
    TemplateRenderer,
    ProfileCard,
    RenderedDocument,
    SkillGroup,
    group_skills_by_category,
    resolve_photo_url,
    render_cv,
)

__all__ = [
    "GeneratedCvContent",
    "TemplateName",
    "TemplateRenderer",
    "ProfileCard",
    "RenderedDocument",
    "SkillGroup",
    "group_skills_by_category",
    "resolve_photo_url",
    "render_cv",
]
