# edgeblog/config.py
import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # 🗄️ Base de datos
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///edgeblog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🔐 JWT (sin valor por defecto: las rutas protegidas fallan cerradas)
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_IN = int(os.environ.get("JWT_EXPIRES_IN", 3600))

    # 🖼️ Cloudinary
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    BLOB_FOLDER = os.environ.get("BLOB_FOLDER", "blog_post_images")
    MAX_IMAGE_SIZE = int(os.environ.get("MAX_IMAGE_SIZE", 10 * 1024 * 1024))

    # ✉️ Correo
    MAIL_SERVER = os.environ.get("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.environ.get("MAIL_PORT", 587))
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", True)
    MAIL_USE_SSL = _env_bool("MAIL_USE_SSL", False)
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER", MAIL_USERNAME)
    CONTACT_RECIPIENT = os.environ.get("CONTACT_RECIPIENT", MAIL_USERNAME)

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-not-for-production"
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = "noreply@edgeblog.test"
    CONTACT_RECIPIENT = "owner@edgeblog.test"
    MAX_IMAGE_SIZE = 1024 * 1024
    LOG_LEVEL = "WARNING"
