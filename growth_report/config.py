"""
Configuration Module

Settings for retrieval, status reporting and logging, read from the
environment (and a local .env file when present).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Retrieval
FETCH_TIMEOUT = _float_env("GROWTH_REPORT_FETCH_TIMEOUT", 10.0)  # seconds
FETCH_BACKEND = os.getenv("GROWTH_REPORT_FETCH_BACKEND", "httpx").lower()  # httpx | playwright
USER_AGENT = os.getenv(
    "GROWTH_REPORT_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) Gecko/20100101 Firefox/121.0",
)

# Status channel
STATUS_CLEAR_DELAY = _float_env("GROWTH_REPORT_STATUS_CLEAR_DELAY", 2.0)  # seconds

# Logging
LOG_LEVEL = os.getenv("GROWTH_REPORT_LOG_LEVEL", "WARNING").upper()

# PDF exports
REPORTS_DIR = Path(os.getenv("GROWTH_REPORT_REPORTS_DIR", "reports"))
