import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "anon_key": os.getenv("SUPABASE_ANON_KEY", ""),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE", "logs/hr_dashboard.log")
