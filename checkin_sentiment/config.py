import os
from dotenv import load_dotenv

load_dotenv()  # load variables from .env into environment

def _flag(name, default="0"):
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

# environment
APP_ENV = os.getenv("APP_ENV", "development")
HOST    = os.getenv("HOST", "0.0.0.0")
PORT    = int(os.getenv("PORT", "5100"))

# analytics endpoint (capture API); disabled unless both are set
ANALYTICS_URL     = os.getenv("ANALYTICS_URL")
ANALYTICS_API_KEY = os.getenv("ANALYTICS_API_KEY")

# app settings
REQUEST_TIMEOUT_S  = float(os.getenv("REQUEST_TIMEOUT_S", "5"))
LATENCY_BUDGET_MS  = 150.0
VERBOSE_SENTIMENT  = _flag("VERBOSE_SENTIMENT")

# derived
ANALYTICS_ENABLED = bool(ANALYTICS_URL and ANALYTICS_API_KEY)
