import os

API_TITLE = "F1 Teams and Drivers API"
API_DESCRIPTION = "API for retrieving F1 teams and drivers information"
API_VERSION = "1.0.0"

CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*").split(",")
SEED_FILE = os.environ.get("SEED_FILE", "")
CHECK_REFERENCES = os.environ.get("CHECK_REFERENCES", "1").lower() not in ("0", "false", "no")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3333"))
