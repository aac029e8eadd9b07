import os
import tempfile

SECRET_KEY = "test-secret"

DATA_PATH = os.getenv("DATA_PATH", os.path.join(tempfile.gettempdir(), "employee-directory-test.json"))
TOKEN_TTL_HOURS = 24
# Cheap hashing keeps the suite fast
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_STORE = True
AUTO_SEED_ADMIN = False
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
