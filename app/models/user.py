from ..extensions import db
from datetime import datetime
import uuid


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255))
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    profile = db.relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    job_postings = db.relationship("JobPosting", back_populates="user", cascade="all, delete-orphan")
    generated_cvs = db.relationship("GeneratedCV", back_populates="user", cascade="all, delete-orphan")
    feedback = db.relationship("Feedback", back_populates="user", cascade="all, delete-orphan")

    # for string representation
    def __repr__(self):
        return f"<User {self.email}>"
