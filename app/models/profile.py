from app.extensions import db
from datetime import datetime
import uuid


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    full_name = db.Column(db.String(100))
    email = db.Column(db.String(255))
    phone = db.Column(db.String(50))
    location = db.Column(db.String(255))
    linkedin_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    portfolio_url = db.Column(db.String(500))
    professional_summary = db.Column(db.Text)
    profile_picture_url = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="profile")
    work_experience = db.relationship("WorkExperience", back_populates="profile", cascade="all, delete-orphan")
    education = db.relationship("Education", back_populates="profile", cascade="all, delete-orphan")
    skills = db.relationship("Skill", back_populates="profile", cascade="all, delete-orphan")
    projects = db.relationship("Project", back_populates="profile", cascade="all, delete-orphan")
    certifications = db.relationship("Certification", back_populates="profile", cascade="all, delete-orphan")
    languages = db.relationship("Language", back_populates="profile", cascade="all, delete-orphan")
    generated_cvs = db.relationship("GeneratedCV", back_populates="profile", cascade="all, delete-orphan")
