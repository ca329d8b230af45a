import os

from werkzeug.security import generate_password_hash

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pinya_db_test"),
}

ADMIN_PASSWORD_HASH = generate_password_hash("test-admin")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_FILE = None

ROTATION_STEP_DEGREES = 45
DEFAULT_CASTELL_TYPE = "4d7"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
