import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# mysql://user@host:port/dbname, password goes in DATABASE_KEY
DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_KEY = os.getenv("DATABASE_KEY")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo classes/sections on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
