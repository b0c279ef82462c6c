"""
Configuration settings for the README Studio application.

Values come from the environment (or a local .env file). Change them there
rather than editing this module.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# GitHub API Configuration
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
# Optional; raises the anonymous rate limit of 60 requests/hour
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN") or None


def _float_or_none(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"README_STUDIO_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None


# No timeout unless one is configured explicitly
HTTP_TIMEOUT = _float_or_none(os.getenv("README_STUDIO_HTTP_TIMEOUT"))

# Number of repositories requested when filling projects from GitHub
REPO_LIMIT = int(os.getenv("README_STUDIO_REPO_LIMIT", "3"))

# Preview theme selected at session start: dark, light, neon or gradient
DEFAULT_THEME = os.getenv("README_STUDIO_THEME", "dark")

LOG_LEVEL = os.getenv("README_STUDIO_LOG_LEVEL", "INFO").upper()

_logging_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once per process."""
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # silence noisy connection-pool logging
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _logging_configured = True
