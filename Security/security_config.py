"""
APPLICATION CONFIG
==================
Centralized settings loaded from environment.
"""

# FLOW:
# - Load the env file once, then read env vars into SETTINGS.
# HOW:
# - APP_ENV=production selects .env.production, everything else uses .env.
# - Variables already present in the process environment win over the file.

from __future__ import annotations

import os
import dotenv


def get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_name() -> str:
    env = os.getenv("APP_ENV", "").strip().lower()
    if env in {"prod", "production"}:
        return ".env.production"
    return ".env"


def _env_path() -> str:
    root = os.path.dirname(os.path.dirname(__file__))
    return os.path.join(root, _env_name())


dotenv.load_dotenv(_env_path())

SETTINGS = {
    "APP_ENV": os.getenv("APP_ENV", "development").strip().lower() or "development",
    "DATABASE_URL": os.getenv("DATABASE_URL", "sqlite:///./contacts.db"),
    "LOG_DIR": os.getenv("LOG_DIR", "logs"),
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    "HOST": os.getenv("HOST", "127.0.0.1"),
    "PORT": get_int("PORT", 4000),
    "SECURITY_HEADERS_ENABLED": get_bool("SECURITY_HEADERS_ENABLED", True),
    "METHOD_OVERRIDE_METHODS": get_list("METHOD_OVERRIDE_METHODS", ["PUT", "PATCH", "DELETE"]),
    "REQUEST_ID_HEADER": os.getenv("REQUEST_ID_HEADER", "x-request-id").strip().lower() or "x-request-id",
    "REQUEST_ID_MAX_LENGTH": get_int("REQUEST_ID_MAX_LENGTH", 64),
}


def is_development() -> bool:
    return SETTINGS["APP_ENV"] in {"dev", "development", "local"}
