import logging

from app.extensions import db
from app.errors import NotFoundError
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
    Feedback,
)

logger = logging.getLogger(__name__)

# List presentation order per entity
ORDERINGS = {
    WorkExperience: lambda: (WorkExperience.start_date.desc(),),
    Education: lambda: (Education.start_date.desc(),),
    Skill: lambda: (Skill.name.asc(),),
    Project: lambda: (Project.start_date.desc(), Project.name.asc()),
    Certification: lambda: (Certification.issue_date.desc(),),
    Language: lambda: (Language.name.asc(),),
    JobPosting: lambda: (JobPosting.created_at.desc(),),
    GeneratedCV: lambda: (GeneratedCV.created_at.desc(),),
    Feedback: lambda: (Feedback.created_at.desc(),),
}


def get_or_404(model, entity_id, kind):
    record = db.session.get(model, entity_id) if entity_id else None
    if record is None:
        raise NotFoundError(kind, entity_id)
    return record


def list_for_profile(model, profile_id):
    """All rows of ``model`` owned by a profile, in presentation order."""
    return model.query.filter_by(profile_id=profile_id).order_by(*ORDERINGS[model]()).all()


def list_for_user(model, user_id):
    return model.query.filter_by(user_id=user_id).order_by(*ORDERINGS[model]()).all()


def create_record(model, values: dict):
    record = model(**values)
    db.session.add(record)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception(f"Database error creating {model.__name__}")
        raise
    logger.info(f"✅ Created {model.__name__} {record.id}")
    return record


def update_record(record, values: dict):
    for key, value in values.items():
        setattr(record, key, value)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception(f"Database error updating {type(record).__name__} {record.id}")
        raise
    return record


def delete_record(record):
    db.session.delete(record)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception(f"Database error deleting {type(record).__name__} {record.id}")
        raise
    logger.info(f"🗑️ Deleted {type(record).__name__} {record.id}")


# ==================== HELPER FUNCTIONS ====================

def _iso(value):
    return value.isoformat() if value is not None else None


def work_experience_to_dict(exp: WorkExperience):
    return {
        "id": exp.id,
        "profileId": exp.profile_id,
        "company": exp.company,
        "position": exp.position,
        "location": exp.location,
        "startDate": _iso(exp.start_date),
        "endDate": _iso(exp.end_date),
        "description": exp.description,
        "achievements": list(exp.achievements or []),
    }


def education_to_dict(edu: Education):
    return {
        "id": edu.id,
        "profileId": edu.profile_id,
        "institution": edu.institution,
        "degree": edu.degree,
        "fieldOfStudy": edu.field_of_study,
        "startDate": _iso(edu.start_date),
        "endDate": _iso(edu.end_date),
        "gpa": float(edu.gpa) if edu.gpa is not None else None,
        "description": edu.description,
    }


def skill_to_dict(skill: Skill):
    return {
        "id": skill.id,
        "profileId": skill.profile_id,
        "name": skill.name,
        "category": skill.category,
        "proficiencyLevel": skill.proficiency_level,
    }


def project_to_dict(project: Project):
    return {
        "id": project.id,
        "profileId": project.profile_id,
        "name": project.name,
        "description": project.description,
        "technologies": list(project.technologies or []),
        "url": project.url,
        "githubUrl": project.github_url,
        "startDate": _iso(project.start_date),
        "endDate": _iso(project.end_date),
    }


def certification_to_dict(cert: Certification):
    return {
        "id": cert.id,
        "profileId": cert.profile_id,
        "name": cert.name,
        "issuer": cert.issuer,
        "issueDate": _iso(cert.issue_date),
        "expiryDate": _iso(cert.expiry_date),
        "credentialId": cert.credential_id,
        "credentialUrl": cert.credential_url,
    }


def language_to_dict(lang: Language):
    return {
        "id": lang.id,
        "profileId": lang.profile_id,
        "name": lang.name,
        "proficiency": lang.proficiency,
    }


def profile_to_dict(profile: Profile, include_children=True):
    data = {
        "id": profile.id,
        "userId": profile.user_id,
        "fullName": profile.full_name,
        "email": profile.email,
        "phone": profile.phone,
        "location": profile.location,
        "linkedinUrl": profile.linkedin_url,
        "githubUrl": profile.github_url,
        "portfolioUrl": profile.portfolio_url,
        "professionalSummary": profile.professional_summary,
        "profilePictureUrl": profile.profile_picture_url,
        "createdAt": _iso(profile.created_at),
        "updatedAt": _iso(profile.updated_at),
    }
    if include_children:
        data.update({
            "workExperience": [work_experience_to_dict(e) for e in list_for_profile(WorkExperience, profile.id)],
            "education": [education_to_dict(e) for e in list_for_profile(Education, profile.id)],
            "skills": [skill_to_dict(s) for s in list_for_profile(Skill, profile.id)],
            "projects": [project_to_dict(p) for p in list_for_profile(Project, profile.id)],
            "certifications": [certification_to_dict(c) for c in list_for_profile(Certification, profile.id)],
            "languages": [language_to_dict(l) for l in list_for_profile(Language, profile.id)],
        })
    return data


def job_posting_to_dict(job: JobPosting):
    return {
        "id": job.id,
        "userId": job.user_id,
        "jobTitle": job.job_title,
        "company": job.company,
        "jobUrl": job.job_url,
        "jobDescription": job.job_description,
        "requiredSkills": list(job.required_skills or []),
        "keywords": list(job.keywords or []),
        "experienceLevel": job.experience_level,
        "createdAt": _iso(job.created_at),
        "updatedAt": _iso(job.updated_at),
    }


def generated_cv_to_dict(cv: GeneratedCV, include_relations=True):
    data = {
        "id": cv.id,
        "userId": cv.user_id,
        "profileId": cv.profile_id,
        "jobPostingId": cv.job_posting_id,
        "generatedContent": cv.generated_content,
        "generationStatus": cv.generation_status,
        "templateName": cv.template_name,
        "tone": cv.tone,
        "contentLanguage": cv.content_language,
        "includeProfilePicture": bool(cv.include_profile_picture),
        "cvSpecificPhotoUrl": cv.cv_specific_photo_url,
        "aiModelUsed": cv.ai_model_used,
        "errorMessage": cv.error_message,
        "createdAt": _iso(cv.created_at),
        "updatedAt": _iso(cv.updated_at),
    }
    if include_relations:
        data["profile"] = profile_to_dict(cv.profile, include_children=False) if cv.profile else None
        data["jobPosting"] = (
            {"jobTitle": cv.job_posting.job_title, "company": cv.job_posting.company}
            if cv.job_posting else None
        )
    return data


def feedback_to_dict(feedback: Feedback):
    return {
        "id": feedback.id,
        "userId": feedback.user_id,
        "description": feedback.description,
        "createdAt": _iso(feedback.created_at),
    }
