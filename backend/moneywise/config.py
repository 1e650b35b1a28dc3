import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./moneywise.db")

# Comma separated; "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Remote insights endpoint. Empty means insights are always computed in-process.
INSIGHTS_SERVICE_URL = os.getenv("INSIGHTS_SERVICE_URL", "")
INSIGHTS_SERVICE_KEY = os.getenv("INSIGHTS_SERVICE_KEY", "")
INSIGHTS_TIMEOUT = float(os.getenv("INSIGHTS_TIMEOUT", "10"))
INSIGHTS_MAX_TRANSACTIONS = int(os.getenv("INSIGHTS_MAX_TRANSACTIONS", "100"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

INSIGHTS_ERROR_MESSAGE = "Failed to generate insights"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}
