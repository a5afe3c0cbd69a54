# app/services/authorization.py
"""Ownership checks for resources reached through a profile or a user."""
from flask_jwt_extended import get_jwt_identity

from app.databases import get_or_404
from app.errors import AuthorizationError
from app.models import Profile


class OwnershipPolicy:
    def __init__(self, user_id):
        self.user_id = str(user_id)

    def profile(self, profile_id) -> Profile:
        profile = get_or_404(Profile, profile_id, "Profile")
        self.check_profile(profile)
        return profile

    def check_profile(self, profile):
        if str(profile.user_id) != self.user_id:
            raise AuthorizationError("You do not have access to this profile")
        return profile

    def check_child(self, record):
        """Child entities (work experience, skills, ...) belong to a profile."""
        return self.check_profile(record.profile)

    def check_user_owned(self, record, kind):
        if str(record.user_id) != self.user_id:
            raise AuthorizationError(f"You do not have access to this {kind.lower()}")
        return record


def current_policy() -> OwnershipPolicy:
    """Policy for the user named by the request's JWT."""
    return OwnershipPolicy(get_jwt_identity())
