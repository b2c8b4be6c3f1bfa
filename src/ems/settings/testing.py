import os

SECRET_KEY = "test-secret"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
JSON_LOGS = False

AUTO_INIT_DB = True
AUTO_SEED_DB = False
