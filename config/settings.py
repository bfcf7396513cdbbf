"""Project-wide settings and defaults."""

import os
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# CLI output
OUTPUT_FORMATS = ("text", "json")
DEFAULT_OUTPUT = os.environ.get("PRODUCTKEY_OUTPUT", "text").lower()
if DEFAULT_OUTPUT not in OUTPUT_FORMATS:
    DEFAULT_OUTPUT = "text"

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
