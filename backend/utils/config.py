"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Optional JSON or CSV file of vehicles loaded into the store at startup.
VEHICLES_FILE = os.environ.get("VEHICLES_FILE", "")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080"
    ).split(",")
    if origin.strip()
]
