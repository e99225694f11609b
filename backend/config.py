"""
Runtime settings, read from the environment.

main.py calls load_dotenv() before importing this module, so values can
also come from a .env file next to the backend:
  CORS_ORIGINS=http://localhost:3000,https://example.com
  LOG_LEVEL=DEBUG
  SEED_DEMO_USERS=false
  HOST=0.0.0.0
  PORT=8000
"""

import os

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

SEED_DEMO_USERS = os.environ.get("SEED_DEMO_USERS", "true").lower() not in ("0", "false", "no")

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))
