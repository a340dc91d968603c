"""Configuration for the Messagely HTTP client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("MESSAGELY_BASE_URL", "http://localhost:8000")
REQUEST_TIMEOUT = int(os.getenv("MESSAGELY_REQUEST_TIMEOUT", "30"))
