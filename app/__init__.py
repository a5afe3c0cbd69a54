import logging

from flask import Flask
from config import Config
from pymysql import connect
from .extensions import cors, db, migrate, jwt, bcrypt
from .errors import register_error_handlers
from .routes.auth_routes import auth_bp
from .routes.profile_routes import profile_bp
from .routes.resource_routes import resource_blueprints
from .routes.job_posting_routes import job_posting_bp
from .routes.generated_cv_routes import generated_cv_bp
from .routes.feedback_routes import feedback_bp
from .cli import cv_cli
from .services.cv_documents import build_export_pipeline
from app.database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Allow CORS from the web client
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(config_class)

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)

    register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(profile_bp, url_prefix="/api/profile")
    for url_prefix, blueprint in resource_blueprints():
        app.register_blueprint(blueprint, url_prefix=f"/api/{url_prefix}")
    app.register_blueprint(job_posting_bp, url_prefix="/api/job-postings")
    app.register_blueprint(generated_cv_bp, url_prefix="/api/generated-cv")
    app.register_blueprint(feedback_bp, url_prefix="/api/feedback")

    app.extensions["cv_writer"] = build_cv_writer(app.config)
    app.extensions["export_pipeline_factory"] = build_export_pipeline

    app.cli.add_command(seed_all)
    app.cli.add_command(cv_cli)

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    # no-op when the root logger already has handlers
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger().setLevel(level)


def build_cv_writer(config):
    """The text-generation collaborator, or None when tailoring is off."""
    if not config.get("AI_TAILORING_ENABLED") or not config.get("GEMINI_API_KEY"):
        logger.info("AI tailoring disabled; CVs are generated from the profile as-is")
        return None
    from app.services.cv_writer import GeminiCvWriter
    return GeminiCvWriter(config["GEMINI_API_KEY"], config["GEMINI_MODEL"])


def create_database_if_not_exists(config=Config):
    host_parts = config.DB_HOST.split(":")
    host = host_parts[0]
    port = int(host_parts[1]) if len(host_parts) > 1 else 3306

    logger.info(f"🔧 Ensuring database '{config.DB_NAME}' exists...")
    logger.info(f"Connecting to DB server at {host}:{port} with user '{config.DB_USER}'")

    conn = connect(
        host=host,
        port=port,
        user=config.DB_USER,
        password=config.DB_PASSWORD or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS {config.DB_NAME}")
        conn.commit()
    finally:
        conn.close()
