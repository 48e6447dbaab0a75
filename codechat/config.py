"""
Runtime settings for CodeChat Reviewer.

Everything is read from the environment once at import time so the
values stay simple module constants.
"""
import os


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


DEBUG = _env_bool("DEBUG")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Request limits
MIN_CODE_CHARS = int(os.getenv("MIN_CODE_CHARS", "10"))
MAX_CODE_CHARS = int(os.getenv("MAX_CODE_CHARS", "200000"))

# Snippets longer than this get a "break it up" issue
LONG_SNIPPET_LINES = int(os.getenv("LONG_SNIPPET_LINES", "80"))

REPORT_PREPARED_BY = os.getenv("REPORT_PREPARED_BY", "CodeChat Reviewer")
