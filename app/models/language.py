from app.extensions import db
import uuid


class Language(db.Model):
    __tablename__ = "languages"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    proficiency = db.Column(db.String(50))

    profile = db.relationship("Profile", back_populates="languages")
