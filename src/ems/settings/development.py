import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Relative sqlite paths resolve against the Flask instance folder.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///ems.db")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "0")))

# Create missing tables on startup (no migrations are tracked)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also load demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
