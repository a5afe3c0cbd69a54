from app.extensions import db
from app.models import (
    User,
    Profile,
    WorkExperience,
    Education,
    Skill,
    Project,
    Certification,
    Language,
)
from app.database.seed.seed_users import DEMO_EMAIL
from datetime import date


def seed():
    print("🌱 Seeding profiles...")

    user = User.query.filter_by(email=DEMO_EMAIL).first()
    if not user:
        print("⚠️ Demo user not found! Please seed users first.")
        return
    if Profile.query.filter_by(user_id=user.id).first():
        print("ℹ️ Demo profile already exists, skipping")
        return

    profile = Profile(
        user_id=user.id,
        full_name="Alex Morgan",
        email=DEMO_EMAIL,
        phone="+1 555 0100",
        location="Berlin, Germany",
        linkedin_url="https://www.linkedin.com/in/alex-morgan",
        github_url="https://github.com/alexmorgan",
        professional_summary="Backend engineer building reliable APIs and data pipelines in Python.",
    )
    profile.work_experience = [
        WorkExperience(
            company="Acme Analytics",
            position="Senior Backend Engineer",
            location="Berlin",
            start_date=date(2021, 3, 1),
            description="Owns the ingestion and reporting services.",
            achievements=["Cut report latency by 60%", "Led migration to PostgreSQL"],
        ),
        WorkExperience(
            company="Northwind Labs",
            position="Software Engineer",
            start_date=date(2018, 6, 1),
            end_date=date(2021, 2, 28),
            achievements=["Built the public REST API"],
        ),
    ]
    profile.education = [
        Education(
            institution="Technical University of Munich",
            degree="BSc",
            field_of_study="Computer Science",
            start_date=date(2014, 10, 1),
            end_date=date(2018, 3, 31),
            gpa=3.6,
        ),
    ]
    profile.skills = [
        Skill(name="Python", category="Languages", proficiency_level="Expert"),
        Skill(name="Flask", category="Frameworks", proficiency_level="Advanced"),
        Skill(name="Docker", category="Tools"),
        Skill(name="SQL", category="Languages", proficiency_level="Advanced"),
    ]
    profile.projects = [
        Project(
            name="Open Metrics Exporter",
            description="Prometheus exporter for batch jobs.",
            technologies=["Python", "Prometheus"],
            github_url="https://github.com/alexmorgan/open-metrics-exporter",
            start_date=date(2022, 1, 1),
        ),
    ]
    profile.certifications = [
        Certification(
            name="AWS Certified Developer",
            issuer="Amazon Web Services",
            issue_date=date(2022, 5, 10),
            credential_url="https://aws.amazon.com/verification",
        ),
    ]
    profile.languages = [
        Language(name="English", proficiency="Fluent"),
        Language(name="German", proficiency="Professional"),
    ]

    db.session.add(profile)
    db.session.commit()
    print("✅ Profiles seeded successfully!")
