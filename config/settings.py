from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DATA_PATH = str(_ROOT / "data" / "team-data.json")


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    data_path: str

    # Paging
    page_size: int
    reset_page_on_query: bool

    # Display
    placeholder_photo: str

    log_level: str
    run_env: str

    # Source schema
    required_fields: list[str]
    optional_fields: list[str]
    link_channels: dict[str, str]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    raw_page_size = os.getenv("PAGE_SIZE", "6")
    try:
        page_size = int(raw_page_size)
    except ValueError:
        raise RuntimeError(f"PAGE_SIZE must be an integer, got {raw_page_size!r}")
    if page_size < 1:
        raise RuntimeError(f"PAGE_SIZE must be positive, got {page_size}")

    return Settings(
        data_path=os.getenv("DATA_PATH", DEFAULT_DATA_PATH),
        page_size=page_size,
        reset_page_on_query=_env_flag("RESET_PAGE_ON_QUERY", "true"),
        placeholder_photo=os.getenv("PLACEHOLDER_PHOTO", "/placeholder.svg"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        required_fields=["id", "name", "jobTitle"],
        optional_fields=[
            "photo",
            "bio",
            "email",
            "phone",
            "socialLinks",
            "skills",
        ],
        # source key -> channel name
        link_channels={
            "linkedin": "professional-network",
            "twitter": "microblog",
        },
    )
