import os
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _env_flag(name, default="true"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'default-secret-key-change-me')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'cv_builder')

    # Build MySQL connection string (using PyMySQL driver) unless a full URL is given
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or (
        f"mysql+pymysql://{DB_USER}@{DB_HOST}/{DB_NAME}"
        if not DB_PASSWORD else
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000')

    # Text generation (CV tailoring)
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
    GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'models/gemini-2.5-flash-lite')
    AI_TAILORING_ENABLED = _env_flag('AI_TAILORING_ENABLED')

    # PDF export
    EXPORT_PAGE_WIDTH_MM = float(os.getenv('EXPORT_PAGE_WIDTH_MM', '210'))
    EXPORT_SCALE = int(os.getenv('EXPORT_SCALE', '3'))
    EXPORT_SETTLE_SECONDS = float(os.getenv('EXPORT_SETTLE_SECONDS', '0.5'))
    EXPORT_IMAGE_TIMEOUT = float(os.getenv('EXPORT_IMAGE_TIMEOUT', '10'))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-length'
    AI_TAILORING_ENABLED = False
    GEMINI_API_KEY = None
    EXPORT_SETTLE_SECONDS = 0
    LOG_LEVEL = 'WARNING'
