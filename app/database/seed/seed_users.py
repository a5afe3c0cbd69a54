from app.extensions import db
from app.models import User
from datetime import datetime
from flask_bcrypt import generate_password_hash

DEMO_EMAIL = "demo@example.com"


def seed():
    print("🌱 Seeding users...")

    users = [
        User(
            name="Demo User",
            email=DEMO_EMAIL,
            password=generate_password_hash("password123").decode("utf-8"),
            created_at=datetime.utcnow()
        ),
    ]

    # prevent duplicates
    for user in users:
        existing = User.query.filter_by(email=user.email).first()
        if not existing:
            db.session.add(user)

    db.session.commit()
    print("✅ Users seeded successfully!")
