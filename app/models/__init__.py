from .user import User
from .profile import Profile
from .work_experience import WorkExperience
from .education import Education
from .skill import Skill
from .project import Project
from .certification import Certification
from .language import Language
from .job_posting import JobPosting
from .generated_cv import GeneratedCV, GENERATION_STATUSES
from .feedback import Feedback

__all__ = [
    "User",
    "Profile",
    "WorkExperience",
    "Education",
    "Skill",
    "Project",
    "Certification",
    "Language",
    "JobPosting",
    "GeneratedCV",
    "GENERATION_STATUSES",
    "Feedback",
]
