from app.extensions import db
from datetime import datetime
import uuid


class JobPosting(db.Model):
    __tablename__ = "job_postings"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    job_title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255))
    job_url = db.Column(db.String(500))
    job_description = db.Column(db.Text, nullable=False)
    required_skills = db.Column(db.JSON, default=list)
    keywords = db.Column(db.JSON, default=list)
    experience_level = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="job_postings")
    generated_cvs = db.relationship("GeneratedCV", back_populates="job_posting")
