# app/services/auth.py
import logging
from datetime import timedelta

from flask_jwt_extended import create_access_token

from app.errors import AuthenticationError, ConflictError
from app.extensions import db, bcrypt
from app.models.user import User

logger = logging.getLogger(__name__)

TOKEN_LIFETIME = timedelta(hours=3)


class AuthService:
    @staticmethod
    def _issue_token(user):
        return create_access_token(
            identity=str(user.id),
            additional_claims={"email": user.email},
            expires_delta=TOKEN_LIFETIME,
        )

    @staticmethod
    def authenticate_user(email, password):
        """
        Check email & password using bcrypt.
        Return JWT if valid.
        """
        logger.info(f"🔐 Auth attempt: {email}")

        user = User.query.filter_by(email=email).first()

        if not user or not bcrypt.check_password_hash(user.password, password):
            logger.info("❌ Invalid email or password")
            raise AuthenticationError("Invalid email or password")

        logger.info(f"✅ Auth successful for {email}")
        return AuthService._issue_token(user)

    @staticmethod
    def register(name, email, password):
        """
        Create a new user.
        Return JWT after successful registration.
        """
        logger.info(f"📝 Register attempt: name: {name}, email: {email}")

        existing = User.query.filter_by(email=email).first()
        if existing:
            raise ConflictError("Email already registered")

        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")
        user = User(name=name, email=email, password=hashed_password)

        try:
            db.session.add(user)
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.exception("❌ Registration failed")
            raise

        logger.info(f"✅ Registration successful for {email}")
        return AuthService._issue_token(user)
