"""Environment configuration for the telegraph line services"""

import logging
import os
import sys

PORT = int(os.getenv("PORT", "3001"))
HOST = os.getenv("TELEGRAPH_HOST", "0.0.0.0")
ENVIRONMENT = os.getenv("TELEGRAPH_ENV", "production")

RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", "10"))
RATE_LIMIT_WINDOW_SECONDS = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))
MAX_MORSE_LENGTH = int(os.getenv("MAX_MORSE_LENGTH", "500"))

OPERATOR_MODEL = os.getenv("OPERATOR_MODEL", "gemini-2.0-flash")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def api_key() -> str | None:
    """Return the Gemini API key, if one is configured"""
    return os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")


def rate_limit_enabled() -> bool:
    return ENVIRONMENT != "test" and RATE_LIMIT_MAX > 0


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr; stdout belongs to the MCP stdio channel"""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
