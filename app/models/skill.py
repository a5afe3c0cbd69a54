from app.extensions import db
import uuid


class Skill(db.Model):
    __tablename__ = "skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100))
    proficiency_level = db.Column(db.String(50))

    profile = db.relationship("Profile", back_populates="skills")
