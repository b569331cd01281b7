SECRET_KEY = "test-secret"

JWT_SECRET = "test-jwt-secret"
JWT_ALGORITHM = "HS256"
TOKEN_TTL_HOURS = 24

DEMO_PASSWORD = "password123"

DEFAULT_CLASS_NAME = "Computer Science 101"

SCOPED_BROADCAST = False
DISTINCT_SESSION_ERRORS = False

CORS_ORIGINS = ["http://localhost:3000"]

HOST = "127.0.0.1"
PORT = 5000

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
