import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Signing key for bearer tokens issued at login
JWT_SECRET = os.getenv("JWT_SECRET", "smartattend_jwt_secret_2024")
JWT_ALGORITHM = "HS256"
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

# Every seeded account shares this password
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "password123")

DEFAULT_CLASS_NAME = "Computer Science 101"

# Compatibility switches, both off keeps the original observable behaviour
SCOPED_BROADCAST = bool(int(os.getenv("SCOPED_BROADCAST", "0")))
DISTINCT_SESSION_ERRORS = bool(int(os.getenv("DISTINCT_SESSION_ERRORS", "0")))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = True
