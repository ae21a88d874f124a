from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

load_dotenv(PROJECT_ROOT / ".env")

APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", "8080"))

API_PREFIX = "/api"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# PostgreSQL bigint maximum; OFFSET beyond it cannot be sent to the store.
MAX_OFFSET = 2**63 - 1
# Larger page sizes are clamped down to this value.
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "100"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
