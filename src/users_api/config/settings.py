"""
Configuration settings for the Users API
"""

import os

# Environment configuration
DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Connection pool sizing and per-statement deadline (seconds)
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_STATEMENT_TIMEOUT = float(os.getenv("DB_STATEMENT_TIMEOUT", 10))


def require_database_url() -> str:
    """Return DATABASE_URL or fail fast when it is not configured"""
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL environment variable is required")
    return DATABASE_URL
