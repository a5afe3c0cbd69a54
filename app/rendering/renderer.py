import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from app.errors import UnknownTemplateError
from .content import GeneratedCvContent, SkillEntry

logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

DEFAULT_SKILL_CATEGORY = "Other"


class TemplateName(str, Enum):
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    EXECUTIVE = "executive"
    MINIMAL = "minimal"

    @classmethod
    def parse(cls, value) -> "TemplateName":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise UnknownTemplateError(value, [m.value for m in cls])


_COMMON_TITLES = {
    "education": "Education",
    "skills": "Skills",
    "certifications": "Certifications",
    "languages": "Languages",
}

DEFAULT_SECTION_TITLES = {
    TemplateName.PROFESSIONAL: {
        **_COMMON_TITLES,
        "professionalSummary": "Professional Profile",
        "workExperience": "Work Experience",
        "projects": "Key Projects",
    },
    TemplateName.CREATIVE: {
        **_COMMON_TITLES,
        "professionalSummary": "Professional Summary",
        "workExperience": "Experience",
        "projects": "Projects",
    },
    TemplateName.EXECUTIVE: {
        **_COMMON_TITLES,
        "professionalSummary": "Executive Summary",
        "workExperience": "Experience",
        "projects": "Key Initiatives",
    },
    TemplateName.MINIMAL: {
        **_COMMON_TITLES,
        "professionalSummary": "Professional Summary",
        "workExperience": "Experience",
        "projects": "Selected Works",
    },
}


@dataclass(frozen=True)
class SkillGroup:
    category: str
    skills: tuple


@dataclass(frozen=True)
class ProfileCard:
    """The profile fields a layout may show, detached from the database row."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_model(cls, profile):
        if profile is None:
            return cls()
        return cls(
            full_name=profile.full_name,
            email=profile.email,
            phone=profile.phone,
            location=profile.location,
            linkedin_url=profile.linkedin_url,
            github_url=profile.github_url,
            portfolio_url=profile.portfolio_url,
            profile_picture_url=profile.profile_picture_url,
        )


@dataclass(frozen=True)
class RenderedDocument:
    html: str
    template: TemplateName
    subject_name: str


def group_skills_by_category(skills: List[SkillEntry], default=DEFAULT_SKILL_CATEGORY) -> List[SkillGroup]:
    """Stable grouping: first-seen category order, original order within a group."""
    order = []
    grouped = {}
    for skill in skills:
        category = skill.category or default
        if category not in grouped:
            grouped[category] = []
            order.append(category)
        grouped[category].append(skill)
    return [SkillGroup(category, tuple(grouped[category])) for category in order]


def resolve_photo_url(cv_photo_url=None, include_profile_picture=False, profile_picture_url=None):
    """A per-CV photo always wins; the profile photo only when opted in."""
    if cv_photo_url:
        return cv_photo_url
    if include_profile_picture and profile_picture_url:
        return profile_picture_url
    return None


def _split_name(full_name):
    parts = (full_name or "").split()
    if len(parts) < 2:
        return "", " ".join(parts)
    return " ".join(parts[:-1]), parts[-1]


def _date_range(start, end):
    if not start and not end:
        return ""
    return f"{start or ''} – {end or 'Present'}"


class TemplateRenderer:
    def __init__(self, template_dir=TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["date_range"] = _date_range

    def section_titles(self, content: GeneratedCvContent, template: TemplateName) -> dict:
        titles = dict(DEFAULT_SECTION_TITLES[template])
        titles.update({k: v for k, v in (content.section_titles or {}).items() if v})
        return titles

    def render(
        self,
        content: GeneratedCvContent,
        profile: ProfileCard,
        template_name,
        *,
        include_profile_picture=False,
        cv_photo_url=None,
        job_title=None,
        company=None,
    ) -> RenderedDocument:
        template = TemplateName.parse(template_name)
        first_names, last_name = _split_name(profile.full_name)

        context = {
            "content": content,
            "profile": profile,
            "first_names": first_names,
            "last_name": last_name,
            "titles": self.section_titles(content, template),
            "skill_groups": group_skills_by_category(content.skills),
            "photo_url": resolve_photo_url(
                cv_photo_url, include_profile_picture, profile.profile_picture_url
            ),
            "job_title": job_title,
            "company": company,
            "contact_links": [
                (label, url)
                for label, url in (
                    ("LinkedIn", profile.linkedin_url),
                    ("GitHub", profile.github_url),
                    ("Portfolio", profile.portfolio_url),
                )
                if url
            ],
        }

        html = self.env.get_template(f"{template.value}.html").render(**context)
        logger.debug(f"Rendered {template.value} layout ({len(html)} chars)")
        return RenderedDocument(html=html, template=template, subject_name=profile.full_name or "")


_default_renderer = None


def render_cv(content, profile, template_name, **options) -> RenderedDocument:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer.render(content, profile, template_name, **options)
