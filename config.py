"""
Environment configuration for the Travel Quiz backend.

- SUPABASE_URL: project URL, REST lives under /rest/v1
- SUPABASE_SECRET_KEY: service key sent as apikey and bearer token
- RESULTS_TOP_K: how many destinations a quiz result recommends (default 3, at least 1)
- ATTRACTIONS_PER_DESTINATION: attractions picked per destination (default 3, at least 0)
- HTTP_TIMEOUT: seconds per REST call (default 10)
- LOG_LEVEL: logging level name (default INFO)
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str]
    supabase_secret_key: Optional[str]
    results_top_k: int = 3
    attractions_per_destination: int = 3
    http_timeout: float = 10.0
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings(
        supabase_url=os.getenv("SUPABASE_URL"),
        supabase_secret_key=os.getenv("SUPABASE_SECRET_KEY"),
        results_top_k=_int_env("RESULTS_TOP_K", 3, minimum=1),
        attractions_per_destination=_int_env("ATTRACTIONS_PER_DESTINATION", 3, minimum=0),
        http_timeout=_float_env("HTTP_TIMEOUT", 10.0),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
