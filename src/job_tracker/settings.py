from __future__ import annotations

import os
from dataclasses import dataclass, field

from .policy import DEFAULT_TIMEOUT_MS


class SettingsError(ValueError):
    pass


def _split_csv(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise SettingsError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            default_timeout_ms=_env_int("JT_DEFAULT_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            host=os.getenv("JT_HOST", "127.0.0.1"),
            port=_env_int("JT_PORT", 8000, minimum=0),
            reload=os.getenv("JT_RELOAD", "0") == "1",
            cors_origins=_split_csv(os.getenv("JT_CORS_ORIGINS", "*")) or ["*"],
            log_level=os.getenv("JT_LOG_LEVEL", "INFO").upper(),
        )
