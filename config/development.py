import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DATA_PATH = Config.DATA_PATH
TOKEN_TTL_HOURS = Config.TOKEN_TTL_HOURS
PASSWORD_HASH_METHOD = Config.PASSWORD_HASH_METHOD

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create an empty data file on startup when it is missing
AUTO_INIT_STORE = bool(int(os.getenv("AUTO_INIT_STORE", "1")))
# Seed the admin account on startup (needs ADMIN_PASSWORD)
AUTO_SEED_ADMIN = bool(int(os.getenv("AUTO_SEED_ADMIN", "1")))
ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
