"""Template rendering of a GeneratedCvContent snapshot."""

import pytest

from app.errors import UnknownTemplateError
from app.rendering.content import (
    CertificationEntry,
    GeneratedCvContent,
    LanguageEntry,
    ProjectEntry,
    SkillEntry,
    WorkExperienceEntry,
)
from app.rendering.renderer import (
    DEFAULT_SECTION_TITLES,
    ProfileCard,
    TemplateName,
    group_skills_by_category,
    render_cv,
    resolve_photo_url,
)

PROFILE = ProfileCard(
    full_name="Jane O'Brien-Smith",
    email="jane@example.com",
    linkedin_url="https://www.linkedin.com/in/jane",
    profile_picture_url="https://cdn.example.com/jane.png",
)


def _content(**overrides):
    values = dict(
        professional_summary="Engineer who ships.",
        work_experience=[WorkExperienceEntry(company="Acme", position="Engineer", start_date="2020-01-01")],
        skills=[SkillEntry(name="Python", category="Languages")],
    )
    values.update(overrides)
    return GeneratedCvContent(**values)


@pytest.mark.parametrize("template", list(TemplateName))
def test_every_layout_renders_core_sections(template):
    html = render_cv(_content(), PROFILE, template).html
    titles = DEFAULT_SECTION_TITLES[template]

    assert 'id="cv-preview"' in html
    assert "Engineer who ships." in html
    assert titles["workExperience"] in html
    assert titles["skills"] in html
    assert titles["education"] in html


def test_rendering_is_idempotent():
    first = render_cv(_content(), PROFILE, "creative").html
    second = render_cv(_content(), PROFILE, "creative").html
    assert first == second


def test_template_name_is_case_insensitive():
    assert render_cv(_content(), PROFILE, "Executive").template is TemplateName.EXECUTIVE


def test_unknown_template_is_rejected():
    with pytest.raises(UnknownTemplateError) as excinfo:
        render_cv(_content(), PROFILE, "fancy")
    assert "fancy" in excinfo.value.message


@pytest.mark.parametrize("template, projects_title", [
    ("professional", "Key Projects"),
    ("creative", "Projects"),
    ("executive", "Key Initiatives"),
    ("minimal", "Selected Works"),
])
def test_optional_sections_only_when_present(template, projects_title):
    bare = render_cv(_content(), PROFILE, template).html
    assert "cv-projects" not in bare
    assert "cv-certifications" not in bare
    assert "cv-languages" not in bare

    full = render_cv(_content(
        projects=[ProjectEntry(name="Tracker", github_url="https://github.com/jane/tracker")],
        certifications=[CertificationEntry(name="CKA", issuer="CNCF", issue_date="2022-01-15")],
        languages=[LanguageEntry(name="Irish", proficiency="Native")],
    ), PROFILE, template).html
    assert projects_title in full
    assert "cv-certifications" in full
    assert "cv-languages" in full


def test_section_title_overrides_win():
    content = _content(section_titles={"workExperience": "Where I Worked"})
    html = render_cv(content, PROFILE, "professional").html
    assert "Where I Worked" in html
    assert "Work Experience" not in html


def test_links_are_anchors():
    html = render_cv(_content(
        projects=[ProjectEntry(name="Tracker", github_url="https://github.com/jane/tracker")],
    ), PROFILE, "minimal").html
    assert '<a class="contact-link" href="https://www.linkedin.com/in/jane">' in html
    assert 'href="https://github.com/jane/tracker"' in html


def test_content_is_escaped():
    html = render_cv(_content(professional_summary="<script>alert(1)</script>"), PROFILE, "minimal").html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_photo_only_shown_when_requested():
    without = render_cv(_content(), PROFILE, "professional").html
    assert "cdn.example.com/jane.png" not in without

    opted_in = render_cv(_content(), PROFILE, "professional", include_profile_picture=True).html
    assert 'src="https://cdn.example.com/jane.png"' in opted_in

    specific = render_cv(
        _content(), PROFILE, "professional",
        include_profile_picture=True, cv_photo_url="https://cdn.example.com/cv.png",
    ).html
    assert 'src="https://cdn.example.com/cv.png"' in specific
    assert "jane.png" not in specific


def test_job_target_in_header():
    html = render_cv(_content(), PROFILE, "creative", job_title="Backend Engineer", company="Globex").html
    assert "Backend Engineer @ Globex" in html


def test_subject_name_from_profile():
    assert render_cv(_content(), PROFILE, "minimal").subject_name == "Jane O'Brien-Smith"
    assert render_cv(_content(), ProfileCard(), "minimal").subject_name == ""


def test_skill_grouping_is_stable():
    skills = [
        SkillEntry(name="Python", category="Languages"),
        SkillEntry(name="Docker", category="Tools"),
        SkillEntry(name="Go", category="Languages"),
        SkillEntry(name="Teamwork"),
    ]
    groups = group_skills_by_category(skills)

    assert [g.category for g in groups] == ["Languages", "Tools", "Other"]
    assert [s.name for s in groups[0].skills] == ["Python", "Go"]
    assert [s.name for s in groups[2].skills] == ["Teamwork"]


def test_uncategorized_skills_render_under_other():
    html = render_cv(_content(skills=[SkillEntry(name="Teamwork")]), PROFILE, "professional").html
    assert ">Other<" in html


@pytest.mark.parametrize("cv_photo, include, profile_photo, expected", [
    ("cv.png", False, "p.png", "cv.png"),
    ("cv.png", True, "p.png", "cv.png"),
    (None, True, "p.png", "p.png"),
    (None, False, "p.png", None),
    (None, True, None, None),
])
def test_photo_precedence(cv_photo, include, profile_photo, expected):
    assert resolve_photo_url(cv_photo, include, profile_photo) == expected


def test_grouping_keeps_first_seen_category_order():
    skills = [
        SkillEntry(name="Go", category="Backend"),
        SkillEntry(name="React", category="Frontend"),
        SkillEntry(name="Rust", category="Backend"),
    ]
    grouped = [(g.category, [s.name for s in g.skills]) for g in group_skills_by_category(skills)]
    assert grouped == [("Backend", ["Go", "Rust"]), ("Frontend", ["React"])]
