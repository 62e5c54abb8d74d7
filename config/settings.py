"""
Configuration settings for TicketTrack.

Centralized configuration for the store, the summarizer and the CLI.
Values can be overridden through environment variables.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("DATA_ROOT", str(PROJECT_ROOT / "data")))
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Store backend: "local" (JSON file) or "remote" (HTTP collection)
STORE_BACKEND = os.getenv("STORE_BACKEND", "local")

# Local backend
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", str(DATA_ROOT / "tickettrack_db_v2.json"))
STORE_LATENCY_SECONDS = float(os.getenv("STORE_LATENCY_SECONDS", "0"))

# Remote backend
REMOTE_API_URL = os.getenv("REMOTE_API_URL", "")
REMOTE_CLEAR_PATH = os.getenv("REMOTE_CLEAR_PATH") or None  # No bulk-clear route by default
REMOTE_TIMEOUT_SECONDS = float(os.getenv("REMOTE_TIMEOUT_SECONDS", "10"))

# API Configuration
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")

# Summarizer
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gemini-1.5-flash")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.0"))
SUMMARY_WINDOW = int(os.getenv("SUMMARY_WINDOW", "20"))  # Most recent records sent to the model
SUMMARY_MAX_ATTEMPTS = int(os.getenv("SUMMARY_MAX_ATTEMPTS", "1"))

# Dashboard
TREND_WINDOW = int(os.getenv("TREND_WINDOW", "10"))
RECENT_ENTRIES_LIMIT = int(os.getenv("RECENT_ENTRIES_LIMIT", "5"))

# Admin gate
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "tickettrack.log"
