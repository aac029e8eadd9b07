import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Single JSON document holding companies, departments, users and employees
    DATA_PATH = os.environ.get("DATA_PATH", str(BASE_DIR / "database" / "data.json"))

    TOKEN_TTL_HOURS = int(os.environ.get("TOKEN_TTL_HOURS", "24"))
    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD", "scrypt")

    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
