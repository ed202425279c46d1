"""Configuration from environment variables."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from packages.shared.ranked_list.models import MIN_LIST_ITEMS, RANKED_LIST_BLOCK_NAME

# Load .env from project root (parent of services/ranked-list-service)
_project_root = Path(__file__).resolve().parents[2]
load_dotenv(_project_root / ".env")


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Integer env var; unset or malformed values fall back to default."""
    v = os.getenv(key, "").strip()
    try:
        return int(v) if v else default
    except ValueError:
        return default


class Settings:
    """Ranked list schema service settings."""

    environment: str = get_env("ENVIRONMENT", "development")
    log_level: str = get_env("LOG_LEVEL", "INFO")
    cors_origins: str = get_env("CORS_ORIGINS", "*")

    # Block name the collector matches in parsed content trees
    block_name: str = get_env("RANKED_LIST_BLOCK_NAME") or RANKED_LIST_BLOCK_NAME
    # ItemList is only emitted for at least this many ranked blocks
    min_items: int = get_env_int("RANKED_LIST_MIN_ITEMS", MIN_LIST_ITEMS)
    # Request guard: largest content tree accepted, nested blocks included
    max_content_nodes: int = get_env_int("MAX_CONTENT_NODES", 5000)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
