import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///ems.db")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "1")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
