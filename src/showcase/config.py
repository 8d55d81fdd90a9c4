"""Runtime settings from environment variables (.env is loaded by the entry points)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://127.0.0.1:8010"
DEFAULT_DELAY_MS = 2000
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TEMPERATURE = 25


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    delay_ms: int = DEFAULT_DELAY_MS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    temperature: int = DEFAULT_TEMPERATURE

    def url(self, path: str) -> str:
        """Join path onto api_base_url."""
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"


def load_env_file(repo_root: Path) -> Path | None:
    """Load .env from repo root or current dir (first found). Returns the loaded path."""
    for path in (repo_root / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def _int(env: Mapping[str, str], key: str, default: int, *, minimum: int | None = 0) -> int:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}.") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{key} must be at least {minimum}, got {value}.")
    return value


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}.")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from SHOWCASE_* variables; unset or blank values use defaults."""
    if env is None:
        env = os.environ
    base_url = (env.get("SHOWCASE_API_BASE_URL") or "").strip() or DEFAULT_API_BASE_URL
    log_level = (env.get("SHOWCASE_LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SHOWCASE_LOG_LEVEL must be a logging level name, got {log_level!r}.")
    return Settings(
        api_base_url=base_url,
        delay_ms=_int(env, "SHOWCASE_DELAY_MS", DEFAULT_DELAY_MS),
        http_timeout=_float(env, "SHOWCASE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        log_level=log_level,
        temperature=_int(env, "SHOWCASE_TEMPERATURE", DEFAULT_TEMPERATURE, minimum=None),
    )
