# app/errors.py
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for every error the API reports to its callers."""

    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_dict(self):
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(AppError):
    """Malformed or missing input. Raised before anything is written."""

    status_code = 400

    @classmethod
    def for_field(cls, field, message):
        return cls(message, details=[{"field": field, "message": message}])


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, kind, entity_id):
        super().__init__(f"{kind} with ID {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class AuthenticationError(AppError):
    status_code = 401


class AuthorizationError(AppError):
    status_code = 403


class ConflictError(AppError):
    status_code = 409


class ExternalServiceError(AppError):
    """AI generation, PDF library or rasterization failures."""

    status_code = 502


class CvGenerationError(ExternalServiceError):
    """Generation failed after the record was persisted as ``failed``."""

    def __init__(self, message, generated_cv_id):
        super().__init__(message)
        self.generated_cv_id = generated_cv_id

    def to_dict(self):
        payload = super().to_dict()
        payload["generatedCvId"] = self.generated_cv_id
        payload["generationStatus"] = "failed"
        return payload


class ExportError(ExternalServiceError):
    def __init__(self, stage, cause):
        super().__init__(f"PDF export failed: {cause}")
        self.stage = stage
        self.cause = cause


class TemplateError(AppError):
    status_code = 400


class UnknownTemplateError(TemplateError):
    def __init__(self, template_name, known):
        super().__init__(
            f"Unknown template '{template_name}'. Expected one of: {', '.join(known)}"
        )
        self.template_name = template_name


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        if error.status_code >= 500:
            logger.error(f"❌ {type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"❌ Unhandled error: {error}")
        return jsonify({"error": "Internal server error"}), 500
