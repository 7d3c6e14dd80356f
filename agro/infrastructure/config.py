# agro/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    cors_origins: tuple[str, ...]
    log_enabled: bool
    debug: bool


def _flag(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_enabled=_flag("API_LOG_ENABLED", "true"),
        debug=_flag("API_DEBUG", "false"),
    )
