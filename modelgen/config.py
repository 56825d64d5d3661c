"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("MODELGEN_HOST", "0.0.0.0")
PORT = int(os.getenv("MODELGEN_PORT", "8000"))
RELOAD = os.getenv("MODELGEN_RELOAD", "true").lower() in ("1", "true", "yes")

# Logging
LOG_LEVEL = os.getenv("MODELGEN_LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("MODELGEN_CORS_ORIGINS", "*").split(",") if o.strip()]
