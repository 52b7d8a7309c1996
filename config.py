"""Configuration for the sentiment comment desk."""
from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_categories(value: str) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(x.strip().lower() for x in value.split(",") if x.strip())


# Stores
MAX_RECORDS = int(os.getenv("MAX_RECORDS", "255"))  # Live records per store (users, comments)
CATEGORIES = _parse_categories(os.getenv("CATEGORIES", "positive,neutral,negative"))

# Stricter validation on edit. Off by default: edits skip the checks create performs.
STRICT_USERNAME_ON_EDIT = _parse_bool(os.getenv("STRICT_USERNAME_ON_EDIT", "false"))
STRICT_CATEGORY_ON_EDIT = _parse_bool(os.getenv("STRICT_CATEGORY_ON_EDIT", "false"))

# Fixed administrator credential (not a store record)
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
ADMIN_USER_ID = 0  # Author id used for comments written by the admin

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")  # Logs go to stderr, under the console menus

# Web auth
JWT_SECRET = os.getenv("JWT_SECRET", "change-me-in-production-use-long-random-string")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7"))

# Web server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
