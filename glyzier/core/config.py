import os
from pathlib import Path
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

# Load .env from the project root; real environment variables win
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    logger.info(f"Loading environment from: {env_path}")
    load_dotenv(dotenv_path=env_path, override=False)
else:
    logger.warning(f".env file not found at: {env_path}")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_size(value: str, default: int = 100 * 1024 * 1024) -> int:
    """Turn sizes such as '100MB' or '512KB' into bytes."""
    size = (value or "").strip().upper()
    if not size:
        return default
    multiplier = 1
    for suffix, factor in (("GB", 1024 ** 3), ("MB", 1024 ** 2), ("KB", 1024)):
        if size.endswith(suffix):
            multiplier = factor
            size = size[: -len(suffix)]
            break
    try:
        return int(size.strip()) * multiplier
    except ValueError:
        logger.warning(f"Invalid size value '{value}', using default {default}")
        return default


# Basic settings
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-glyzier-dev-secret-key-0123456789")
API_PREFIX = os.getenv("API_PREFIX", "/api")
DEBUG = _as_bool(os.getenv("DEBUG", "False"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
SEED_DEMO_DATA = _as_bool(os.getenv("SEED_DEMO_DATA", "False"))

# Database
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "glyzier")
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DATABASE_URL = os.getenv("DATABASE_URL", f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}")

# Redis
CACHE_ENABLED = _as_bool(os.getenv("CACHE_ENABLED", "True"))
REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = os.getenv("REDIS_PORT", "6379")
REDIS_DB = os.getenv("REDIS_DB", "0")
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD", "")
REDIS_URL = os.getenv("REDIS_URL", f"redis://:{REDIS_PASSWORD}@{REDIS_HOST}:{REDIS_PORT}/{REDIS_DB}")

# JWT
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# Password reset
RESET_CODE_EXPIRE_MINUTES = int(os.getenv("RESET_CODE_EXPIRE_MINUTES", "10"))

# Cloudinary
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", "")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", "")
CLOUDINARY_IMAGES_FOLDER = os.getenv("CLOUDINARY_IMAGES_FOLDER", "glyzier/product-images")
CLOUDINARY_PREVIEWS_FOLDER = os.getenv("CLOUDINARY_PREVIEWS_FOLDER", "glyzier/previews")
CLOUDINARY_DIGITAL_FOLDER = os.getenv("CLOUDINARY_DIGITAL_FOLDER", "glyzier/digital")
SIGNED_URL_EXPIRE_SECONDS = int(os.getenv("SIGNED_URL_EXPIRE_SECONDS", "3600"))

# File uploads
FILE_UPLOAD_MAX_SIZE = _parse_size(os.getenv("FILE_UPLOAD_MAX_SIZE", "100MB"))
FILE_UPLOAD_ALLOWED_TYPES = [
    content_type.strip().lower()
    for content_type in os.getenv(
        "FILE_UPLOAD_ALLOWED_TYPES",
        "image/jpeg,image/png,image/gif,image/webp,application/pdf,application/zip",
    ).split(",")
    if content_type.strip()
]

# Email (HTTP provider); codes are logged when not configured
EMAIL_API_URL = os.getenv("EMAIL_API_URL")
EMAIL_API_KEY = os.getenv("EMAIL_API_KEY")
EMAIL_FROM = os.getenv("EMAIL_FROM", "noreply@glyzier.com")
EMAIL_HTTP_TIMEOUT = float(os.getenv("EMAIL_HTTP_TIMEOUT", "10.0"))

logger.info(f"Cloudinary cloud name in use: {CLOUDINARY_CLOUD_NAME or 'not set'}")
