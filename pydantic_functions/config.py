"""Read configuration from environment. Hosts load their .env before importing (see main.py)."""
import os

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Max characters of a handler output or reducer state written to the log
OUTPUT_LOG_LIMIT = os.getenv("OUTPUT_LOG_LIMIT", "200")
try:
    OUTPUT_LOG_LIMIT = int(OUTPUT_LOG_LIMIT)
except ValueError:
    OUTPUT_LOG_LIMIT = 200
