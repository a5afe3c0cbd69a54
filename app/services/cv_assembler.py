# app/services/cv_assembler.py
import logging

from app.databases import list_for_profile, create_record, update_record
from app.errors import AuthorizationError, CvGenerationError, ValidationError
from app.extensions import db
from app.models import (
    Profile,
    WorkExperience,
    Education,
    Skill,
    Project,
    Certification,
    Language,
    JobPosting,
    GeneratedCV,
)
from app.rendering.content import (
    GeneratedCvContent,
    WorkExperienceEntry,
    EducationEntry,
    SkillEntry,
    ProjectEntry,
    CertificationEntry,
    LanguageEntry,
)
from app.rendering.renderer import TemplateName
from app.schemas import GenerateCvSchema, validate_payload

logger = logging.getLogger(__name__)


def _iso(value):
    return value.isoformat() if value is not None else None


def flatten_profile(profile: Profile) -> GeneratedCvContent:
    """Copy the profile's current entities into a snapshot document."""
    return GeneratedCvContent(
        professional_summary=profile.professional_summary or "",
        work_experience=[
            WorkExperienceEntry(
                company=exp.company,
                position=exp.position,
                location=exp.location,
                start_date=_iso(exp.start_date),
                end_date=_iso(exp.end_date),
                description=exp.description,
                achievements=list(exp.achievements or []),
            )
            for exp in list_for_profile(WorkExperience, profile.id)
        ],
        education=[
            EducationEntry(
                institution=edu.institution,
                degree=edu.degree,
                field_of_study=edu.field_of_study,
                start_date=_iso(edu.start_date),
                end_date=_iso(edu.end_date),
                gpa=float(edu.gpa) if edu.gpa is not None else None,
                description=edu.description,
            )
            for edu in list_for_profile(Education, profile.id)
        ],
        skills=[
            SkillEntry(name=skill.name, category=skill.category, proficiency_level=skill.proficiency_level)
            for skill in list_for_profile(Skill, profile.id)
        ],
        projects=[
            ProjectEntry(
                name=project.name,
                description=project.description,
                technologies=list(project.technologies or []),
                url=project.url,
                github_url=project.github_url,
                start_date=_iso(project.start_date),
                end_date=_iso(project.end_date),
            )
            for project in list_for_profile(Project, profile.id)
        ],
        certifications=[
            CertificationEntry(
                name=cert.name,
                issuer=cert.issuer,
                issue_date=_iso(cert.issue_date),
                expiry_date=_iso(cert.expiry_date),
                credential_id=cert.credential_id,
                credential_url=cert.credential_url,
            )
            for cert in list_for_profile(Certification, profile.id)
        ],
        languages=[
            LanguageEntry(name=lang.name, proficiency=lang.proficiency)
            for lang in list_for_profile(Language, profile.id)
        ],
    )


class CvAssembler:
    """
    Builds one GeneratedCV record from a profile and an optional job posting.

    Every check runs before the first write, so a rejected request leaves
    nothing behind. Once the ``pending`` record exists, any downstream
    failure marks it ``failed`` and the error is raised to the caller.
    """

    def __init__(self, writer=None):
        self.writer = writer

    def generate(self, user_id, payload) -> GeneratedCV:
        request = validate_payload(GenerateCvSchema, payload)

        profile = db.session.get(Profile, request.profile_id)
        if profile is None:
            raise ValidationError.for_field("profileId", f"Profile with ID {request.profile_id} not found")
        if str(profile.user_id) != str(user_id):
            raise AuthorizationError("You do not have access to this profile")

        job_posting = None
        if request.job_posting_id:
            job_posting = db.session.get(JobPosting, request.job_posting_id)
            if job_posting is None:
                raise ValidationError.for_field(
                    "jobPostingId", f"Job posting with ID {request.job_posting_id} not found"
                )
            if str(job_posting.user_id) != str(profile.user_id):
                raise AuthorizationError("Job posting belongs to a different user than the profile")

        template = TemplateName.parse(request.template_name) if request.template_name else TemplateName.PROFESSIONAL
        use_writer = self.writer is not None and job_posting is not None

        generated_cv = create_record(GeneratedCV, {
            "user_id": str(user_id),
            "profile_id": profile.id,
            "job_posting_id": job_posting.id if job_posting else None,
            "generation_status": "pending",
            "template_name": template.value,
            "tone": request.tone,
            "content_language": request.content_language,
            "include_profile_picture": request.include_profile_picture,
            "cv_specific_photo_url": request.cv_specific_photo_url,
            "ai_model_used": self.writer.model_name if use_writer else None,
        })
        logger.info(f"🔄 Generating CV {generated_cv.id} for profile {profile.id}")

        try:
            content = flatten_profile(profile)
            if use_writer:
                content = self.writer.tailor(
                    content, job_posting, tone=request.tone, language=request.content_language
                )
        except Exception as e:
            db.session.rollback()
            update_record(generated_cv, {"generation_status": "failed", "error_message": str(e)})
            logger.error(f"❌ CV generation {generated_cv.id} failed: {e}")
            message = e.message if hasattr(e, "message") else f"CV generation failed: {e}"
            raise CvGenerationError(message, generated_cv.id) from e

        update_record(generated_cv, {
            "generated_content": content.to_json(),
            "generation_status": "completed",
        })
        logger.info(f"✅ CV {generated_cv.id} generated")
        return generated_cv


def update_summary(generated_cv: GeneratedCV, summary: str) -> GeneratedCV:
    """The one mutation a generated CV allows after generation."""
    if generated_cv.generated_content is None:
        raise ValidationError.for_field("professionalSummary", "CV content has not been generated yet")
    content = GeneratedCvContent.from_json(generated_cv.generated_content)
    return update_record(generated_cv, {"generated_content": content.with_summary(summary).to_json()})
