import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pinya_db"),
}

# Must be provided (werkzeug generate_password_hash output); empty disables admin endpoints
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

ROTATION_STEP_DEGREES = int(os.getenv("ROTATION_STEP_DEGREES", "45"))
DEFAULT_CASTELL_TYPE = os.getenv("DEFAULT_CASTELL_TYPE", "4d7")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
