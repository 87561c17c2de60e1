"""Runtime settings for the scoring API, read from the environment."""
import os

API_HOST = os.environ.get("SCORING_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("SCORING_API_PORT", "5000"))
API_DEBUG = os.environ.get("SCORING_API_DEBUG", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("SCORING_LOG_LEVEL", "INFO").upper()
