import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
JWT_ALGORITHM = "HS256"
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "password123")

DEFAULT_CLASS_NAME = "Computer Science 101"

SCOPED_BROADCAST = bool(int(os.getenv("SCOPED_BROADCAST", "0")))
DISTINCT_SESSION_ERRORS = bool(int(os.getenv("DISTINCT_SESSION_ERRORS", "0")))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
