"""Settings read from the environment."""
import logging
import os


def parse_log_level(value: str) -> str:
    """Upper-cased level name, or INFO when ``value`` is not a logging level."""
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


_origins_env = os.getenv("ALLOWED_ORIGINS", "")
ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()] if _origins_env else ["*"]

LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))
