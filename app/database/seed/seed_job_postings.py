from app.extensions import db
from app.models import User, JobPosting
from app.database.seed.seed_users import DEMO_EMAIL
from app.services.keywords import extract_keywords

DESCRIPTION = (
    "We are hiring a backend engineer with 5+ years of Python experience. "
    "You will build REST APIs with Flask, run services on Docker and AWS, "
    "and work in an agile team. A bachelor degree in computer science is a plus."
)


def seed():
    print("🌱 Seeding job postings...")

    user = User.query.filter_by(email=DEMO_EMAIL).first()
    if not user:
        print("⚠️ Demo user not found! Please seed users first.")
        return

    if not JobPosting.query.filter_by(user_id=user.id, job_title="Backend Engineer").first():
        db.session.add(JobPosting(
            user_id=user.id,
            job_title="Backend Engineer",
            company="Globex",
            job_description=DESCRIPTION,
            required_skills=["Python", "Flask", "Docker"],
            keywords=extract_keywords(DESCRIPTION),
            experience_level="Senior",
        ))

    db.session.commit()
    print("✅ Job postings seeded successfully!")
