import os

SECRET_KEY = "test-secret"

DATABASE_URL = os.getenv("DATABASE_URL", "mysql://root@localhost:3306/school_admin_test")
DATABASE_KEY = os.getenv("DATABASE_KEY", "test")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
