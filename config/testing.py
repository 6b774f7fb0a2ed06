import os

from config.config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = dict(Config.db_config(), database=os.getenv("DB_NAME", "tuition_center_test"))

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
