import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DATA_PATH = Config.DATA_PATH
TOKEN_TTL_HOURS = Config.TOKEN_TTL_HOURS
PASSWORD_HASH_METHOD = Config.PASSWORD_HASH_METHOD

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_STORE = bool(int(os.getenv("AUTO_INIT_STORE", "1")))
AUTO_SEED_ADMIN = bool(int(os.getenv("AUTO_SEED_ADMIN", "0")))
ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD
