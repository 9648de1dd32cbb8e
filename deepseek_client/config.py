from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from deepseek_client.enums import DefaultConfig, TemperatureValue
from deepseek_client.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    base_url: str
    timeout: float

    model: str | None
    temperature: float

    log_level: str


def load_settings() -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(find_dotenv(usecwd=True), override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v.strip() == "":
            return default
        return v.strip()

    def getfloat(key: str, default: float) -> float:
        raw = getenv(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc

    return Settings(
        api_key=getenv("DEEPSEEK_API_KEY", None),
        base_url=getenv("DEEPSEEK_BASE_URL", DefaultConfig.BASE_URL.value) or "",
        timeout=getfloat("DEEPSEEK_TIMEOUT", float(DefaultConfig.TIMEOUT.value)),
        model=getenv("DEEPSEEK_MODEL", None),
        temperature=getfloat("DEEPSEEK_TEMPERATURE", TemperatureValue.GENERAL_CONVERSATION.value),
        log_level=(getenv("DEEPSEEK_LOG_LEVEL", "WARNING") or "WARNING").upper(),
    )
