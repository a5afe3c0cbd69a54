from app.extensions import db
from datetime import datetime
import uuid

GENERATION_STATUSES = ("pending", "completed", "failed")


class GeneratedCV(db.Model):
    __tablename__ = "generated_cvs"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    job_posting_id = db.Column(db.String(36), db.ForeignKey("job_postings.id", ondelete="SET NULL"), nullable=True)
    generated_content = db.Column(db.JSON)
    generation_status = db.Column(db.Enum(*GENERATION_STATUSES, name="generation_status"), default="pending", nullable=False)
    template_name = db.Column(db.String(50), default="professional")
    tone = db.Column(db.String(50))
    content_language = db.Column(db.String(20))
    include_profile_picture = db.Column(db.Boolean, default=False)
    cv_specific_photo_url = db.Column(db.String(500))
    ai_model_used = db.Column(db.String(100))
    error_message = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="generated_cvs")
    profile = db.relationship("Profile", back_populates="generated_cvs")
    job_posting = db.relationship("JobPosting", back_populates="generated_cvs")
