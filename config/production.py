import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "anon_key": os.getenv("SUPABASE_ANON_KEY", ""),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
