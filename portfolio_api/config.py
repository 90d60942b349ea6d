import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(key: str, default: str) -> list[str]:
    raw = os.getenv(key) or default
    return [item.strip() for item in raw.split(",") if item.strip()]


# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = _get_list("CORS_ORIGINS", "http://localhost:5173,http://localhost:8080")

# Database
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'portfolio.db')}"
)
# Hosted Postgres providers still hand out the old scheme
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
SQL_ECHO = _get_bool("SQL_ECHO")

# Authentication
FALLBACK_JWT_SECRET = "fallback-secret"
JWT_SECRET = os.getenv("JWT_SECRET") or FALLBACK_JWT_SECRET
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 1440))
MIN_PASSCODE_LENGTH = 6

# Initial admin, created on startup when the admin table is empty
ADMIN_PASSCODE = os.getenv("ADMIN_PASSCODE")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")

# Outbound email (Resend)
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
MAIL_FROM_NAME = os.getenv("MAIL_FROM_NAME", "Portfolio")
MAIL_FROM_EMAIL = os.getenv("MAIL_FROM_EMAIL", "onboarding@resend.dev")
EMAIL_TIMEOUT = float(os.getenv("EMAIL_TIMEOUT", 10.0))

# Content rules
FEATURED_PROJECTS_LIMIT = int(os.getenv("FEATURED_PROJECTS_LIMIT", 6))
