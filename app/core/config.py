import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

ALLOWED_ENVIRONMENTS = ("development", "production", "test", "provision")

APP_ENV = os.getenv("APP_ENV", "development")
if APP_ENV not in ALLOWED_ENVIRONMENTS:
    raise ValueError(f"APP_ENV must be one of {', '.join(ALLOWED_ENVIRONMENTS)}, got '{APP_ENV}'")

PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Cookie settings
DOMAIN = os.getenv("DOMAIN") or None
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() == "true"
ACCESS_TOKEN_COOKIE = "access_token"

# JWT settings
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dynasty-development-secret")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

DEFAULT_AVATAR_URL = os.getenv(
    "DEFAULT_AVATAR_URL",
    "https://www.gravatar.com/avatar/00000000000000000000000000000000?d=mp&f=y",
)

# Blob store folders
ADMIN_AVATAR_FOLDER = "dynasty/admin/avatar"
CUSTOMER_AVATAR_FOLDER = "dynasty/customer/avatar"
EMPLOYEE_AVATAR_FOLDER = "dynasty/employee/avatar"
PRODUCT_IMAGE_FOLDER = "dynasty/product/image"

# Request throttling, per client address and endpoint
RATE_LIMIT = os.getenv("RATE_LIMIT", "10/minute")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
